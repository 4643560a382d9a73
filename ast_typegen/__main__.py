"""Command-line entrypoint for `python -m ast_typegen`."""

from .runner import main


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
