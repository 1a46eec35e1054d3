"""Command-line interface for jvmsig."""
