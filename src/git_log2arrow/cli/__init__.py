"""Command line interface for Git Log2Arrow."""
