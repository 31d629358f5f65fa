"""Allow ``python -m metricool_cli``."""

from .cli import main

main()
