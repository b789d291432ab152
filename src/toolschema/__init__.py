"""
toolschema - normalize JSON Schema for strict tool-calling APIs.

Function-calling APIs accept a restricted schema dialect: no ``$ref``
indirection, no validation-only keywords, lowercase type names.
toolschema inlines references against the root definitions, folds
validation keywords into ``description`` and strips the rest.
"""

__version__ = "0.1.0"

# Load environment variables from project root .env (if present).
# This makes TOOLSCHEMA_* settings available to NormalizerConfig.from_env().
try:
    from pathlib import Path
    from dotenv import load_dotenv

    _repo_root = Path(__file__).resolve().parents[2]
    _env_path = _repo_root / ".env"
    if _env_path.exists():
        load_dotenv(_env_path, override=False)
except Exception:
    # Never fail import due to dotenv loading.
    pass

from .cleaner import (
    REMOVED_FIELDS,
    VALIDATION_FIELDS,
    SchemaCleaner,
    ValidationConstraint,
)
from .config import NormalizerConfig
from .errors import (
    CircularReferenceError,
    SchemaNormalizationError,
    UnresolvedReferenceError,
)
from .flattener import DefinitionTable, ReferenceFlattener, resolve_ref_name
from .normalizer import SchemaNormalizer, normalize, normalized
from .tools import normalize_tool_spec, normalize_tools
from .types import JsonValue, ReferencePolicy

__all__ = [
    # Entry points
    "normalize",
    "normalized",
    "normalize_tool_spec",
    "normalize_tools",
    # Components
    "SchemaNormalizer",
    "ReferenceFlattener",
    "SchemaCleaner",
    "DefinitionTable",
    "ValidationConstraint",
    "resolve_ref_name",
    "VALIDATION_FIELDS",
    "REMOVED_FIELDS",
    # Config
    "NormalizerConfig",
    "ReferencePolicy",
    "JsonValue",
    # Errors
    "SchemaNormalizationError",
    "UnresolvedReferenceError",
    "CircularReferenceError",
]
