"""Command-line interface for the obituary parser."""
