"""Command implementations for the IP Ranges CLI."""
