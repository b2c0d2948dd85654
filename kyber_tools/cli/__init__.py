"""Command line interface for Kyber Tools."""
