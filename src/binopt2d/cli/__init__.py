"""CLI modules for decoding genomes and running the GA.

Note: avoid importing submodules at import-time. This keeps `python -m binopt2d.cli.<cmd>`
free of `runpy` warnings and avoids loading pymoo when it is not needed.
"""

from __future__ import annotations


def run_single_main(argv: list[str] | None = None) -> int:
    """Lazy wrapper for `binopt2d.cli.run_single.main`."""

    from .run_single import main

    return main(argv)


def run_ga_main(argv: list[str] | None = None) -> int:
    """Lazy wrapper for `binopt2d.cli.run_ga.main`."""

    from .run_ga import main

    return main(argv)


__all__ = ["run_ga_main", "run_single_main"]
