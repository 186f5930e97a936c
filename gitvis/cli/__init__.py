"""Command line interface for gitvis."""
