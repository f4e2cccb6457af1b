"""Entry point for ``python -m goctlkit``."""

from goctlkit.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
