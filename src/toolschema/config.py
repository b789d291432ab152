# src/toolschema/config.py
"""
Configuration for toolschema.

The defaults reproduce the permissive contract: unresolved references
are dropped quietly, circular references stop expanding with a warning,
and nothing ever raises.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

from .types import ReferencePolicy

ENV_PREFIX = "TOOLSCHEMA_"

_TRUTHY = {"1", "true", "yes", "on"}


class NormalizerConfig(BaseModel):
    """Configuration settings for a normalization run."""

    unresolved_refs: ReferencePolicy = Field(
        default=ReferencePolicy.DROP,
        description="Policy for a $ref that names no object definition, or is not a string",
    )
    circular_refs: ReferencePolicy = Field(
        default=ReferencePolicy.WARN,
        description="Policy for a $ref that re-enters a definition on the active resolution chain",
    )
    verbose: bool = Field(
        default=False, description="Log a debug summary after each transform"
    )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "NormalizerConfig":
        """
        Build a config from ``TOOLSCHEMA_*`` environment variables.

        Recognised variables:
            TOOLSCHEMA_UNRESOLVED_REFS: drop | warn | raise
            TOOLSCHEMA_CIRCULAR_REFS: drop | warn | raise
            TOOLSCHEMA_VERBOSE: 1 / true / yes / on

        Unset variables keep their defaults. Invalid policy values raise
        a pydantic ``ValidationError``.
        """
        env = os.environ if environ is None else environ
        values = {}
        for field_name in ("unresolved_refs", "circular_refs"):
            raw = env.get(ENV_PREFIX + field_name.upper())
            if raw:
                values[field_name] = raw.strip().lower()
        verbose = env.get(ENV_PREFIX + "VERBOSE")
        if verbose is not None:
            values["verbose"] = verbose.strip().lower() in _TRUTHY
        return cls(**values)
