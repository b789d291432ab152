"""Strip or relocate keywords the target dialect rejects.

The target dialect cannot enforce validation keywords, so their content
is folded into ``description`` as free text (constraint softening).
Metadata keywords with no such value are dropped outright, and ``type``
names are lowercased.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, List, Tuple

from .types import JsonObject

# (keyword, label) in the order constraints are rendered.
VALIDATION_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("minLength", "minLen"),
    ("maxLength", "maxLen"),
    ("minimum", "min"),
    ("maximum", "max"),
    ("minItems", "minItems"),
    ("maxItems", "maxItems"),
    ("exclusiveMinimum", "exclMin"),
    ("exclusiveMaximum", "exclMax"),
    ("multipleOf", "multipleOf"),
    ("pattern", "pattern"),
)

REMOVED_FIELDS: Tuple[str, ...] = (
    "$schema",
    "additionalProperties",
    "enumCaseInsensitive",
    "enumNormalizeWhitespace",
    "uniqueItems",
    "format",
    "default",
)


def json_text(value: Any) -> str:
    """Render *value* as compact JSON text (``1``, ``"^a+$"``, ``true``)."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)


@dataclass(frozen=True)
class ValidationConstraint:
    """A validation keyword lifted off a schema node."""

    key: str
    label: str
    value: Any

    def render(self) -> str:
        return f"{self.label}: {json_text(self.value)}"


def format_validation_suffix(constraints: List[ValidationConstraint]) -> str:
    """Build the ``" [Validation: ...]"`` text appended to a description."""
    return " [Validation: {}]".format(", ".join(c.render() for c in constraints))


class SchemaCleaner:
    """Rewrites every object node of a (ref-free) schema tree in place.

    Per object node, in order:

    1. Soften constraints: pop each keyword of ``VALIDATION_FIELDS`` and
       append them to ``description`` as ``" [Validation: ...]"``.
    2. Drop every keyword of ``REMOVED_FIELDS``.
    3. Lowercase ``type`` (a string, or the string items of a list).
    4. Recurse into every remaining value.

    Lists are recursed element-wise; scalars pass through untouched.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self.softened_count = 0
        self.removed_count = 0

    def clean(self, node: Any) -> None:
        """Clean *node* and everything below it, in place."""
        if isinstance(node, dict):
            self.soften_constraints(node)
            self.remove_unsupported(node)
            self.normalize_type(node)
            for value in node.values():
                self.clean(value)
        elif isinstance(node, list):
            for item in node:
                self.clean(item)

    def reset_counts(self) -> None:
        self.softened_count = 0
        self.removed_count = 0

    # ------------------------------------------------------------------ #
    # Per-node steps                                                       #
    # ------------------------------------------------------------------ #

    def soften_constraints(self, node: JsonObject) -> List[ValidationConstraint]:
        """Move validation keywords of *node* into its ``description``.

        A missing description is created as ``""`` first. A description
        that is not a string is kept as-is and the suffix is discarded.

        Returns:
            The constraints that were lifted, in ``VALIDATION_FIELDS`` order.
        """
        constraints = [
            ValidationConstraint(key, label, node.pop(key))
            for key, label in VALIDATION_FIELDS
            if key in node
        ]
        if not constraints:
            return constraints

        self.softened_count += len(constraints)
        description = node.setdefault("description", "")
        if isinstance(description, str):
            node["description"] = description + format_validation_suffix(constraints)
        else:
            self._logger.debug(
                "Non-string description (%s); discarding %d constraint(s)",
                type(description).__name__,
                len(constraints),
            )
        return constraints

    def remove_unsupported(self, node: JsonObject) -> None:
        for key in REMOVED_FIELDS:
            if key in node:
                del node[key]
                self.removed_count += 1

    @staticmethod
    def normalize_type(node: JsonObject) -> None:
        type_value = node.get("type")
        if isinstance(type_value, str):
            node["type"] = type_value.lower()
        elif isinstance(type_value, list):
            for index, item in enumerate(type_value):
                if isinstance(item, str):
                    type_value[index] = item.lower()
