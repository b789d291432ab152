"""Entry points for normalizing a schema to the target dialect.

Usage::

    from toolschema import normalize

    schema = json.loads(raw)
    normalize(schema)  # in place

The flattener always runs before the cleaner, so fields merged in from
definitions are cleaned like any other.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

from .cleaner import SchemaCleaner
from .config import NormalizerConfig
from .flattener import ReferenceFlattener


class SchemaNormalizer:
    """Runs reference flattening then schema cleaning over one tree.

    The counters on ``flattener`` and ``cleaner`` describe the last call
    only, so one normalizer can be reused for every schema of a request.
    """

    def __init__(
        self,
        config: NormalizerConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config or NormalizerConfig()
        self._logger = logger or logging.getLogger(__name__)
        self.flattener = ReferenceFlattener(self.config, logger=logger)
        self.cleaner = SchemaCleaner(logger=logger)

    def normalize(self, schema: Any) -> None:
        """Normalize *schema* in place.

        Never raises under the default config. With a ``raise`` policy
        the tree may be left partially flattened.
        """
        table = self.flattener.flatten(schema)
        self.cleaner.reset_counts()
        self.cleaner.clean(schema)

        if self.config.verbose:
            self._logger.debug(
                "Normalized schema: %d definition(s), %d $ref(s) inlined, "
                "%d dropped, %d constraint(s) softened, %d field(s) removed",
                len(table),
                self.flattener.resolved_count,
                self.flattener.dropped_count,
                self.cleaner.softened_count,
                self.cleaner.removed_count,
            )


def normalize(schema: Any, config: NormalizerConfig | None = None) -> None:
    """Normalize *schema* in place for a strict tool-calling dialect.

    Args:
        schema: JSON value tree, usually an object schema. Mutated in place.
        config: Optional ``NormalizerConfig``; defaults are permissive.
    """
    SchemaNormalizer(config).normalize(schema)


def normalized(schema: Any, config: NormalizerConfig | None = None) -> Any:
    """Return a normalized deep copy of *schema*, leaving the input untouched."""
    result = copy.deepcopy(schema)
    normalize(result, config)
    return result
