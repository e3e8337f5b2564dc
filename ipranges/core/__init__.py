"""Core constants and exceptions shared by the IP Ranges package."""
