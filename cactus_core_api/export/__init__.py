"""Exporters that write the core OpenAPI document to disk."""

from .openapi import (
    DEFAULT_FILENAME,
    default_destination,
    export_to_file_system_as_json,
    render_json,
    resolve_destination,
)

__all__ = [
    "DEFAULT_FILENAME",
    "default_destination",
    "export_to_file_system_as_json",
    "render_json",
    "resolve_destination",
]
