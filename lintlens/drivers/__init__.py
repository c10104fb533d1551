"""Drivers implementing LintLens ports."""
