"""Allow ``python -m xxcheck``."""

from xxcheck.main import main

main()
