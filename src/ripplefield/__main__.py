"""Allow ``python -m ripplefield``."""

from ripplefield.cli import main

main()
