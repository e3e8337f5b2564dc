#!/usr/bin/env python3
"""
Unified command-line interface for the IP Ranges system.

This module provides a centralized entry point for various operations:
- Check every ranges document in a directory
- Show the parsed model of a single document
"""

import sys
import argparse

from lxml import etree

from ipranges.config.settings import Settings
from ipranges.core.exceptions import IPRangesError
from ipranges.logging import setup_logging

def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        description='IP Ranges document tools',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('--config', help='Path to a YAML or JSON configuration file')
    parser.add_argument('--log-level', help='Logging level (overrides configuration)')

    # Set up subparsers for different commands
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # Check command
    check_parser = subparsers.add_parser('check', help='Parse every ranges document in a directory')
    check_parser.add_argument('directory', nargs='?', help='Directory containing ranges documents')
    check_parser.add_argument('--prefix', help='Only parse documents whose relative name starts with this prefix')

    # Show command
    show_parser = subparsers.add_parser('show', help='Show the parsed model of one ranges document')
    show_parser.add_argument('file', help='Path to the ranges document')
    show_parser.add_argument('--format', choices=['json', 'yaml'], default='json', help='Output format')

    return parser

def main(argv=None) -> int:
    """Main entry point for the IP Ranges CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Check if a command was specified
    if not args.command:
        parser.print_help()
        return 1

    try:
        settings = Settings.from_file(args.config) if args.config else Settings.get_instance()
    except IPRangesError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging_params = settings.get_logging_params()
    logger = setup_logging('ipranges', args.log_level or logging_params['level'], logging_params['directory'])

    # Execute the appropriate command
    try:
        if args.command == 'check':
            from cli.commands.check_command import check_sources
            source_params = settings.get_source_params()
            directory = args.directory or source_params['directory']
            logger.info(f"Checking ranges documents in directory: {directory}")
            check_sources(directory, args.prefix or source_params['prefix'])

        elif args.command == 'show':
            from cli.commands.show_command import show_document
            show_document(args.file, args.format)

    except (IPRangesError, etree.XMLSyntaxError, OSError) as e:
        logger.error(f"Error executing command: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0

if __name__ == "__main__":
    sys.exit(main())
