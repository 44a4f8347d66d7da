"""Command-line interface for template-stats."""
