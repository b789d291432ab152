"""Inline ``$ref`` pointers against the root definition table.

Target tool-calling dialects have no reference indirection, so every
``$ref`` is replaced by the fields of the definition it names. Only the
root's ``$defs`` / ``definitions`` are collected; ``$defs`` blocks
nested deeper in the tree are ordinary keys to this pass.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .config import NormalizerConfig
from .errors import CircularReferenceError, UnresolvedReferenceError
from .types import JsonObject, ReferencePolicy

# Later sources overwrite earlier ones on a name collision.
DEFINITION_KEYS = ("$defs", "definitions")


def resolve_ref_name(ref: str) -> str:
    """Return the definition name a ``$ref`` points at.

    The name is the final ``/``-delimited segment, so ``#/$defs/Foo``
    and ``#/definitions/Foo`` both give ``Foo``. A ref without ``/``
    resolves to itself.
    """
    return ref.rsplit("/", 1)[-1]


def _pointer_segment(key: Any) -> str:
    return str(key).replace("~", "~0").replace("/", "~1")


@dataclass
class DefinitionTable:
    """Definition name -> schema subtree, scoped to one transform."""

    definitions: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def extract(cls, root: Any) -> "DefinitionTable":
        """Pop ``$defs`` and ``definitions`` off *root* into a new table.

        Both keys are removed whatever they hold; only object values
        contribute entries. A non-object root gives an empty table.
        """
        table = cls()
        if not isinstance(root, dict):
            return table
        for key in DEFINITION_KEYS:
            source = root.pop(key, None)
            if isinstance(source, dict):
                table.definitions.update(source)
        return table

    def lookup(self, name: str) -> Optional[JsonObject]:
        """Return the object definition for *name*, or ``None``."""
        definition = self.definitions.get(name)
        return definition if isinstance(definition, dict) else None

    def __contains__(self, name: object) -> bool:
        return name in self.definitions

    def __len__(self) -> int:
        return len(self.definitions)


class ReferenceFlattener:
    """Replaces every ``$ref`` in a tree with its definition's fields.

    Merging is "insert if absent": fields already on the referencing node
    win over the definition's. Merged content is deep-copied, so the
    table never aliases into the tree. After a merge the same node is
    resolved again, which follows chains like ``A -> B -> C``.

    The names being expanded along the current path form the active
    chain; a field the referencing node already had is not part of that
    expansion. A ``$ref`` back into the chain is circular: expansion stops
    at that node and ``config.circular_refs`` decides how it is reported.
    """

    def __init__(
        self,
        config: NormalizerConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._config = config or NormalizerConfig()
        self._logger = logger or logging.getLogger(__name__)
        self.resolved_count = 0
        self.dropped_count = 0

    # ------------------------------------------------------------------ #
    # Public API                                                           #
    # ------------------------------------------------------------------ #

    def flatten(self, schema: Any) -> DefinitionTable:
        """Extract the root definitions and inline every ``$ref`` in place.

        A definition merged into the root may carry its own ``$defs`` or
        ``definitions``; those are popped again once the walk is done, so
        the root never keeps them.

        Args:
            schema: The schema tree. Mutated in place.

        Returns:
            The definition table that was consumed from the root.

        Raises:
            UnresolvedReferenceError: only under ``ReferencePolicy.RAISE``.
            CircularReferenceError: only under ``ReferencePolicy.RAISE``.
        """
        self.resolved_count = 0
        self.dropped_count = 0
        table = DefinitionTable.extract(schema)
        self._visit(schema, table, "", ())
        if isinstance(schema, dict):
            for key in DEFINITION_KEYS:
                schema.pop(key, None)
        return table

    # ------------------------------------------------------------------ #
    # Traversal                                                            #
    # ------------------------------------------------------------------ #

    def _visit(
        self,
        node: Any,
        table: DefinitionTable,
        path: str,
        chain: Tuple[str, ...],
    ) -> None:
        if isinstance(node, dict):
            merged = self._resolve(node, table, path, chain)
            for key, value in node.items():
                child_path = f"{path}/{_pointer_segment(key)}"
                self._visit(value, table, child_path, merged.get(key, chain))
        elif isinstance(node, list):
            for index, item in enumerate(node):
                self._visit(item, table, f"{path}/{index}", chain)

    def _resolve(
        self,
        node: JsonObject,
        table: DefinitionTable,
        path: str,
        chain: Tuple[str, ...],
    ) -> Dict[str, Tuple[str, ...]]:
        """Substitute ``$ref`` on *node* until none is left.

        Fields already on the node keep the incoming *chain*; only fields
        merged in from a definition are part of its expansion.

        Returns:
            Merged key -> chain in effect below that key.
        """
        merged: Dict[str, Tuple[str, ...]] = {}
        while "$ref" in node:
            ref = node.pop("$ref")
            merged.pop("$ref", None)
            if not isinstance(ref, str):
                self._unresolved(path, ref, None, "value is not a string")
                break

            name = resolve_ref_name(ref)
            if name in chain:
                self._circular(path, ref, name, chain)
                break

            definition = table.lookup(name)
            if definition is None:
                reason = (
                    "definition is not an object"
                    if name in table
                    else "no such definition"
                )
                self._unresolved(path, ref, name, reason)
                break

            # a $ref left after this merge came from the definition
            chain = chain + (name,)
            for key, value in definition.items():
                if key not in node:
                    node[key] = copy.deepcopy(value)
                    merged[key] = chain
            self.resolved_count += 1
        return merged


    # ------------------------------------------------------------------ #
    # Reporting                                                            #
    # ------------------------------------------------------------------ #

    def _unresolved(self, path: str, ref: Any, name: str | None, reason: str) -> None:
        self.dropped_count += 1
        location = path or "/"
        policy = self._config.unresolved_refs
        if policy == ReferencePolicy.RAISE:
            raise UnresolvedReferenceError(
                f"Unresolved $ref {ref!r} at '{location}': {reason}",
                path=path,
                ref=ref,
                name=name,
            )
        level = logging.WARNING if policy == ReferencePolicy.WARN else logging.DEBUG
        self._logger.log(
            level, "Dropping unresolved $ref %r at '%s': %s", ref, location, reason
        )

    def _circular(self, path: str, ref: str, name: str, chain: Tuple[str, ...]) -> None:
        self.dropped_count += 1
        location = path or "/"
        cycle = " -> ".join(chain + (name,))
        policy = self._config.circular_refs
        if policy == ReferencePolicy.RAISE:
            raise CircularReferenceError(
                f"Circular $ref {ref!r} at '{location}' ({cycle})",
                path=path,
                ref=ref,
                chain=chain,
            )
        level = logging.WARNING if policy == ReferencePolicy.WARN else logging.DEBUG
        self._logger.log(
            level, "Stopped expanding circular $ref %r at '%s' (%s)", ref, location, cycle
        )
