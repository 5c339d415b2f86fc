"""
Command-line interface for the RTL SBV Fixer.

This module provides the CLI for fixing single files, fixing folder trees and
running the self-test against the bundled input/output pair.
"""

import argparse
import logging
from pathlib import Path
from typing import Optional
from core.punctuation import build_character_set
from utils.constants import APP_NAME, APP_VERSION, APP_DESCRIPTION, DEFAULT_MAX_WORKERS
from utils.logging_config import setup_logging
from processors.converter import RTLConverter, RTLFixError
from processors.batch_processor import BatchProcessor
from processors.fixture_check import FixtureChecker

logger = logging.getLogger("sbv_fixer")  # Reconfigured in setup_cli_logging


def setup_cli_logging(verbose: bool = False, debug: bool = False,
                      use_colors: bool = True, log_file: Optional[Path] = None) -> logging.Logger:
    """Set up logging for CLI operations."""
    global logger

    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logger = setup_logging(level=level, log_file=log_file, use_colors=use_colors)
    return logger


class CLIHandler:
    """Handles command-line interface operations."""

    def create_parser(self) -> argparse.ArgumentParser:
        """
        Create the main argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog='sbvfix',
            description=APP_DESCRIPTION,
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Fix a single file (writes episode_rtl.sbv)
  sbvfix fix episode.sbv

  # Fix a file into a chosen path
  sbvfix fix episode.sbv --output fixed/episode.sbv

  # Fix every .sbv file under a folder, mirroring it into another folder
  sbvfix batch-fix input_folder output_folder --parallel

  # Check the fixer against the bundled example pair
  sbvfix self-test --show-diff
            """
        )

        parser.add_argument('--version', action='version', version=f'{APP_NAME} {APP_VERSION}')
        parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose output')
        parser.add_argument('-d', '--debug', action='store_true', help='Enable debug output')
        parser.add_argument('--no-colors', action='store_true', help='Disable colored output')
        parser.add_argument('--log-file', type=Path, help='Also write log messages to this file')
        parser.add_argument('--chars', type=str,
                            help='Replace the moveable punctuation set (e.g. for other RTL scripts)')

        subparsers = parser.add_subparsers(dest='command', help='Available commands')

        self._add_fix_parser(subparsers)
        self._add_batch_parser(subparsers)
        self._add_self_test_parser(subparsers)

        return parser

    def _add_fix_parser(self, subparsers):
        """Add fix command parser."""
        fix_parser = subparsers.add_parser(
            'fix',
            help='Fix RTL punctuation in a subtitle file',
            description='Move line-end punctuation so RTL subtitles display correctly'
        )

        fix_parser.add_argument('input', type=Path, help='SBV subtitle file to fix')
        fix_parser.add_argument('-o', '--output', type=Path,
                                help='Output file path (default: <name>_rtl.sbv next to the input)')
        fix_parser.add_argument('-b', '--backup', action='store_true',
                                help='Back up the output file if it already exists')
        fix_parser.add_argument('--keep-ellipsis', action='store_true',
                                help="Don't replace '…' with '...' before fixing")

    def _add_batch_parser(self, subparsers):
        """Add batch-fix command parser."""
        batch_parser = subparsers.add_parser(
            'batch-fix',
            help='Fix all subtitle files in a folder tree',
            description='Fix every SBV file under DIRECTORY and save it under EXPORT'
        )

        batch_parser.add_argument('directory', type=Path, help='Folder to process recursively')
        batch_parser.add_argument('export', type=Path, help='Folder receiving the fixed files')
        batch_parser.add_argument('-b', '--backup', action='store_true',
                                  help='Back up output files that already exist')
        batch_parser.add_argument('--keep-ellipsis', action='store_true',
                                  help="Don't replace '…' with '...' before fixing")
        batch_parser.add_argument('--parallel', action='store_true',
                                  help='Process files in parallel')
        batch_parser.add_argument('--workers', type=int, default=DEFAULT_MAX_WORKERS,
                                  help=f'Number of worker threads (default: {DEFAULT_MAX_WORKERS})')

    def _add_self_test_parser(self, subparsers):
        """Add self-test command parser."""
        test_parser = subparsers.add_parser(
            'self-test',
            help='Compare the fixer output with a known result',
            description='Fix a known input file and compare it with its expected output'
        )

        test_parser.add_argument('--input', type=Path, help='Known input file (default: bundled original.sbv)')
        test_parser.add_argument('--expected', type=Path, help='Expected output file (default: bundled result.sbv)')
        test_parser.add_argument('--show-diff', action='store_true',
                                 help='Print differing lines when the test fails')

    def handle_command(self, args) -> int:
        """
        Handle the parsed command-line arguments.

        Args:
            args: Parsed arguments from argparse

        Returns:
            Exit code (0 for success, non-zero for failure)
        """
        setup_cli_logging(args.verbose, args.debug, not args.no_colors, args.log_file)

        if not args.command:
            logger.error("No command specified. Use --help for usage information.")
            return 1

        try:
            converter = self._create_converter(args)
        except ValueError as e:
            logger.error(str(e))
            return 1

        try:
            if args.command == 'fix':
                return self._handle_fix(args, converter)
            elif args.command == 'batch-fix':
                return self._handle_batch_fix(args, converter)
            elif args.command == 'self-test':
                return self._handle_self_test(args, converter)
            else:
                logger.error(f"Unknown command: {args.command}")
                return 1
        except RTLFixError as e:
            logger.error(str(e))
            return 1

    def _create_converter(self, args) -> RTLConverter:
        if args.chars is None:
            return RTLConverter()
        return RTLConverter(build_character_set(args.chars))

    def _handle_fix(self, args, converter: RTLConverter) -> int:
        """Handle fix command."""
        if not args.input.exists():
            logger.error(f"Input file not found: {args.input}")
            return 1

        output_path = converter.convert_file(
            input_path=args.input,
            output_path=args.output,
            keep_backup=args.backup,
            normalize=not args.keep_ellipsis
        )

        print(f"Fixed file saved to: {output_path}")
        return 0

    def _handle_batch_fix(self, args, converter: RTLConverter) -> int:
        """Handle batch-fix command."""
        if not args.directory.is_dir():
            logger.error(f"Directory not found: {args.directory}")
            return 1

        batch_processor = BatchProcessor(converter, max_workers=args.workers)
        results = batch_processor.process_directory(
            args.directory,
            args.export,
            parallel=args.parallel,
            keep_backup=args.backup,
            normalize=not args.keep_ellipsis
        )

        print(batch_processor.get_processing_summary(results))
        return 0 if results['failed'] == 0 else 1

    def _handle_self_test(self, args, converter: RTLConverter) -> int:
        """Handle self-test command."""
        report = FixtureChecker(converter).run(args.input, args.expected)
        print(report.format(show_diff=args.show_diff))
        return 0 if report.ok else 1
