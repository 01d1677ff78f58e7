"""Command line interface for pathignore."""
