# src/toolschema/errors.py
"""
Error classes for toolschema.

The transform is permissive by default and never raises. These errors
only surface when a ``ReferencePolicy.RAISE`` policy is configured.
"""

from __future__ import annotations

from typing import Sequence


class SchemaNormalizationError(Exception):
    """
    Base exception for all normalization errors.

    Attributes:
        path: JSON-pointer style location of the offending node ("" is the root)
        ref: The raw ``$ref`` value that triggered the error
    """

    def __init__(
        self,
        message: str,
        *,
        path: str = "",
        ref: object = None,
    ):
        super().__init__(message)
        self.path = path
        self.ref = ref


class UnresolvedReferenceError(SchemaNormalizationError):
    """
    Raised when a ``$ref`` names no object definition in the root table.

    This occurs when:
    - The name is missing from ``$defs`` / ``definitions``
    - The definition exists but is not a JSON object
    - The ``$ref`` value is not a string
    """

    def __init__(
        self,
        message: str,
        *,
        path: str = "",
        ref: object = None,
        name: str | None = None,
    ):
        super().__init__(message, path=path, ref=ref)
        self.name = name


class CircularReferenceError(SchemaNormalizationError):
    """
    Raised when a ``$ref`` re-enters a definition already being expanded.

    Example:
        # Node -> children.items -> Node
        CircularReferenceError(
            "Circular $ref to 'Node'",
            path="/properties/children/items",
            ref="#/$defs/Node",
            chain=["Node"],
        )
    """

    def __init__(
        self,
        message: str,
        *,
        path: str = "",
        ref: object = None,
        chain: Sequence[str] = (),
    ):
        super().__init__(message, path=path, ref=ref)
        self.chain = list(chain)
