"""Allow ``python -m construction``."""

from .cli import main

main()
