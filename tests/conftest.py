"""
Pytest configuration and fixtures for toolschema tests.
"""

import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
src_dir = Path(__file__).parent.parent / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))


@pytest.fixture(autouse=True)
def clean_toolschema_env(monkeypatch):
    """Keep TOOLSCHEMA_* settings from the host environment out of tests."""
    for name in ("TOOLSCHEMA_UNRESOLVED_REFS", "TOOLSCHEMA_CIRCULAR_REFS", "TOOLSCHEMA_VERBOSE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def address_schema():
    """Object schema whose ``home`` property references ``$defs/Address``."""
    return {
        "$defs": {
            "Address": {
                "type": "object",
                "properties": {
                    "city": {"type": "string"},
                },
            }
        },
        "properties": {
            "home": {"$ref": "#/$defs/Address"},
        },
    }


@pytest.fixture
def weather_schema():
    """A typical draft 2020-12 tool parameter schema."""
    return {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "type": "object",
        "properties": {
            "location": {
                "type": "string",
                "minLength": 1,
                "format": "city",
            },
            "unit": {
                "type": ["string", "null"],
                "default": "celsius",
            },
        },
        "required": ["location"],
    }


@pytest.fixture
def tree_schema():
    """Self-referential schema: a Node has a list of Node children."""
    return {
        "$defs": {
            "Node": {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "children": {
                        "type": "array",
                        "items": {"$ref": "#/$defs/Node"},
                    },
                },
            }
        },
        "type": "object",
        "properties": {
            "tree": {"$ref": "#/$defs/Node"},
        },
    }
