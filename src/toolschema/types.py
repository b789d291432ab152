# src/toolschema/types.py
"""
Type definitions for toolschema.

A schema is just a JSON value tree: the shapes ``json.loads`` produces.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Union

# JSON value tree (null / bool / number / string / list / dict)
JsonValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]

# A JSON object node
JsonObject = Dict[str, Any]


class ReferencePolicy(str, Enum):
    """
    How the flattener reports a ``$ref`` it cannot substitute.

    In every case the ``$ref`` key is removed from the node; the policy
    only decides how loudly that happens.
    """

    DROP = "drop"
    """Drop the reference silently (debug log only)."""

    WARN = "warn"
    """Drop the reference and log a warning."""

    RAISE = "raise"
    """Raise a ``SchemaNormalizationError`` subclass."""
