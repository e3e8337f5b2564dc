"""
Configuration module for IP Ranges.

This package handles configuration management for the IP Ranges system.
"""

from .settings import Settings

__all__ = ['Settings']
