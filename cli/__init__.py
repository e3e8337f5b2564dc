"""Command-line interface for IP Ranges."""
