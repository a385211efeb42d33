"""Allow running as ``python -m textdtm``."""

from textdtm.cli import main

main()
