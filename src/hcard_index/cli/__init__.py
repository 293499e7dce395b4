"""Command line interface for hcard index."""
