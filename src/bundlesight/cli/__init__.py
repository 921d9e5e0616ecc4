"""Command line interface for bundlesight."""
