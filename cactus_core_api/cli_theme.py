# cactus_core_api/cli_theme.py
"""Terminal theme for the cactus-core-api CLI.

Compact rich markup helpers:
  - branded version line
  - success status line
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

# ── Brand ─────────────────────────────────────────────────────────

BRAND = "cactus-core-api"

# ── Palette ───────────────────────────────────────────────────────

GREEN = "#3FA35B"
MUTED = "dim"


def print_version(version: str, console: Console) -> None:
    """Print a compact branded version line."""
    t = Text()
    t.append(BRAND, style=f"bold {GREEN}")
    t.append(f"  v{version}", style=MUTED)
    console.print(t)


# ── Status lines ──────────────────────────────────────────────────


def ok(msg: str) -> str:
    """Success status line (green check)."""
    return f"  [bold green]✓[/bold green] {msg}"
