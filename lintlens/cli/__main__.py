#!/usr/bin/env python3
"""Entry point for the LintLens CLI when run as python -m lintlens.cli."""

if __name__ == "__main__":
    from lintlens.cli.main import main

    main()
