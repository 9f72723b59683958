"""CLI entrypoint for the crossword builder."""

from __future__ import annotations

from crossword_builder.cli import main


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
