"""Normalize the parameter schemas of tool declarations.

Callers forward tool specs in whatever envelope their client produced.
The parameter schema is found and normalized in place for each of:

* generic: ``{"name", "description", "parameters"}``
* OpenAI: ``{"type": "function", "function": {..., "parameters"}}``
* Anthropic: ``{"name", "description", "input_schema"}``
* MCP: ``{"name", "description", "inputSchema"}``
* Gemini groups: ``{"function_declarations": [...]}`` or
  ``{"functionDeclarations": [...]}``
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from .config import NormalizerConfig
from .normalizer import SchemaNormalizer

logger = logging.getLogger(__name__)

SCHEMA_KEYS = ("parameters", "input_schema", "inputSchema")
DECLARATION_GROUP_KEYS = ("function_declarations", "functionDeclarations")


def normalize_tool_spec(
    spec: Dict[str, Any],
    config: NormalizerConfig | None = None,
) -> Dict[str, Any]:
    """Normalize the parameter schema(s) of one tool spec in place.

    Args:
        spec: A tool declaration in any supported envelope.
        config: Optional ``NormalizerConfig``.

    Returns:
        The same *spec* object. Specs without a schema are returned unchanged.
    """
    _normalize_spec(spec, SchemaNormalizer(config))
    return spec


def normalize_tools(
    tools: List[Dict[str, Any]],
    config: NormalizerConfig | None = None,
) -> List[Dict[str, Any]]:
    """Apply ``normalize_tool_spec`` to every spec of *tools* (in place)."""
    normalizer = SchemaNormalizer(config)
    count = 0
    for spec in tools:
        count += _normalize_spec(spec, normalizer)
    logger.debug("Normalized %d schema(s) across %d tool spec(s)", count, len(tools))
    return tools


def _normalize_spec(spec: Any, normalizer: SchemaNormalizer) -> int:
    """Normalize every schema reachable in *spec*; return how many."""
    if not isinstance(spec, dict):
        return 0

    count = 0
    function = spec.get("function")
    if isinstance(function, dict):
        count += _normalize_spec(function, normalizer)

    for group_key in DECLARATION_GROUP_KEYS:
        declarations = spec.get(group_key)
        if isinstance(declarations, list):
            for declaration in declarations:
                count += _normalize_spec(declaration, normalizer)

    for schema_key in SCHEMA_KEYS:
        if schema_key in spec:
            normalizer.normalize(spec[schema_key])
            count += 1
    return count
