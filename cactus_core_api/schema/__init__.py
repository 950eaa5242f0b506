"""
Cactus Core API Schema Package - Shared Type Definitions

Overview:
---------
Exposes the core OpenAPI document together with small read-only accessors.
Callers that need to modify the document (for example to merge it into a
plugin's own document) get deep copies; the module-level constant is never
handed out for mutation by these helpers.

Composition:
------------
- ``document``: the ``CACTUS_OPEN_API_JSON`` literal and its enumerations.
"""

from __future__ import annotations

import copy
from typing import Any

from .document import (
    CACTUS_OPEN_API_JSON,
    CONSENSUS_ALGORITHM_FAMILIES,
    JWS_COMPACT_PATTERN,
    LEDGER_TYPES,
    OPENAPI_VERSION,
    SCHEMA_REF_PREFIX,
)


def get_openapi_document() -> dict[str, Any]:
    """Return a deep copy of the core OpenAPI document."""
    return copy.deepcopy(CACTUS_OPEN_API_JSON)


def list_schema_names() -> list[str]:
    """Return the names under ``components.schemas`` in declaration order."""
    return list(CACTUS_OPEN_API_JSON["components"]["schemas"])


def get_component_schema(name: str) -> dict[str, Any]:
    """Return a deep copy of the named component schema.

    Raises
    ------
    KeyError
        If ``name`` is not declared under ``components.schemas``.
    """
    schemas = CACTUS_OPEN_API_JSON["components"]["schemas"]
    if name not in schemas:
        raise KeyError(f"Unknown component schema: {name!r}")
    return copy.deepcopy(schemas[name])


__all__ = [
    "CACTUS_OPEN_API_JSON",
    "CONSENSUS_ALGORITHM_FAMILIES",
    "JWS_COMPACT_PATTERN",
    "LEDGER_TYPES",
    "OPENAPI_VERSION",
    "SCHEMA_REF_PREFIX",
    "get_openapi_document",
    "list_schema_names",
    "get_component_schema",
]
