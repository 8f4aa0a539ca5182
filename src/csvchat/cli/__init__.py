"""Command-line interface for csvchat."""
