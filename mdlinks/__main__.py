"""Entry point for ``python -m mdlinks``."""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
