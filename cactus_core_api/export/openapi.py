"""OpenAPI document export -- JSON on the filesystem.

Serializes the core OpenAPI document so that code generators can consume
it without importing Python.

Key function:
    - export_to_file_system_as_json: Write the document as 4-space indented
      JSON to an explicit path or to ``json/generated/openapi-spec.json``.

Run directly to export::

    python -m cactus_core_api.export.openapi [DESTINATION]
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Union

from ..config import get_config
from ..schema import CACTUS_OPEN_API_JSON
from ..utils.logging import get_logger

DEFAULT_FILENAME = "openapi-spec.json"
JSON_INDENT = 4

_FN_TAG = "OpenApiSpec#exportToFileSystemAsJson()"


def default_destination() -> Path:
    """Return ``<output_dir>/openapi-spec.json`` for the configured output dir."""
    return get_config().output_dir / DEFAULT_FILENAME


def resolve_destination(destination: Optional[Union[Path, str]] = None) -> Path:
    """Return the override path when given, else the default destination."""
    if destination:
        return Path(destination)
    return default_destination()


def render_json() -> str:
    """Serialize the document exactly as it is written to disk."""
    return json.dumps(CACTUS_OPEN_API_JSON, indent=JSON_INDENT, ensure_ascii=False)


def export_to_file_system_as_json(destination: Optional[Union[Path, str]] = None) -> Path:
    """Write the core OpenAPI document to ``destination`` as JSON.

    Parameters
    ----------
    destination:
        Target file path. Defaults to ``json/generated/openapi-spec.json``
        inside the configured output directory. An existing file is
        overwritten; the parent directory is never created.

    Returns
    -------
    Path
        The path that was written.

    Raises
    ------
    OSError
        Propagated unchanged when the file cannot be written (missing
        directory, permission denied, disk full).
    """
    logger = get_logger(__name__)
    path = resolve_destination(destination)

    logger.info(f"{_FN_TAG} destination={path}")

    path.write_text(render_json(), encoding="utf-8")
    return path


if __name__ == "__main__":
    from ..cli import cli

    cli()
