"""Command-line entry points for ppx-install."""
