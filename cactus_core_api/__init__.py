"""
Cactus Core API - Shared OpenAPI type definitions for Hyperledger Cactus plugins

This package holds the core OpenAPI 3.0.3 document (identifiers, consortium,
ledger and node data model, JSON Web Signature structures) that plugins
reference from their own API documents, plus an exporter that writes the
document to disk for code generators.

Main Components:
    - cactus_core_api.schema: The document and read-only accessors
    - cactus_core_api.export: JSON export to the filesystem
    - cactus_core_api.cli: ``cactus-core-api-export`` command
"""

__version__ = "0.2.0"

from .schema import (
    CACTUS_OPEN_API_JSON,
    get_component_schema,
    get_openapi_document,
    list_schema_names,
)
from .export import export_to_file_system_as_json

__all__ = [
    "CACTUS_OPEN_API_JSON",
    "get_component_schema",
    "get_openapi_document",
    "list_schema_names",
    "export_to_file_system_as_json",
]
