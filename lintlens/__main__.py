"""Entry point for running LintLens as a module (python -m lintlens)."""

from __future__ import annotations


def main() -> None:
    """Main entry point for module execution."""
    from lintlens.cli import main as cli_main

    cli_main()


if __name__ == "__main__":
    main()
