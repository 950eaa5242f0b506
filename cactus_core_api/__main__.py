"""Allow ``python -m cactus_core_api [DESTINATION]``."""

from .cli import cli

if __name__ == "__main__":
    cli()
