"""LintLens kernel: domain models, ports and the annotation pipeline."""
