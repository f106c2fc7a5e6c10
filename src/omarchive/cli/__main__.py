"""Allow ``python -m omarchive.cli``."""

from omarchive.cli.app import main

main()
