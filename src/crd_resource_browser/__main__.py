"""Module entry point for `python -m crd_resource_browser`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
