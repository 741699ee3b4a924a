"""Command line interface for telemdec."""
