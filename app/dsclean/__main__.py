"""Allow running dsclean with ``python -m dsclean``."""

from dsclean.cli.main import main

main()
