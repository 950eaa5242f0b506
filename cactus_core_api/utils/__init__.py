"""
Cactus Core API Utilities Package - Cross-Cutting Helpers

Logging setup shared by the exporter and the CLI, forwarded through
``__all__`` to keep intra-package imports short.
"""

from .logging import (
    setup_logging,
    get_logger,
    get_current_log_file,
    get_session_id,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "get_current_log_file",
    "get_session_id",
]
