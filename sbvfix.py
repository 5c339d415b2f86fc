#!/usr/bin/env python3
"""
RTL SBV Fixer - Main Application Entry Point
============================================

Some players (VLC among them) don't apply bidirectional rendering to SBV
subtitles, so a Hebrew line like "שלום!" shows up as "!שלום" with the
exclamation mark at the wrong end. This tool moves the punctuation at both
ends of every subtitle line so these players show it correctly.

Usage:
    # Fix one file
    python sbvfix.py fix episode.sbv --output episode_fixed.sbv

    # Fix a folder tree into another folder
    python sbvfix.py batch-fix input_folder output_folder

    # Run the example self-test
    python sbvfix.py self-test --show-diff

    # Help
    python sbvfix.py --help
    python sbvfix.py <command> --help

Only the .sbv format is supported.
"""

import sys
from pathlib import Path
from typing import List, Optional

# Add the current directory to Python path for imports
sys.path.insert(0, str(Path(__file__).parent))

from utils.constants import APP_NAME, APP_VERSION
from ui.cli import CLIHandler


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main application entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    argv = sys.argv[1:] if argv is None else argv
    debug_mode = '--debug' in argv or '-d' in argv

    if debug_mode:
        print_system_info()

    cli_handler = CLIHandler()
    cli_parser = cli_handler.create_parser()

    try:
        args = cli_parser.parse_args(argv)
        return cli_handler.handle_command(args)
    except SystemExit:
        # argparse calls sys.exit() for --help, --version, etc.
        raise
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if debug_mode:
            import traceback
            traceback.print_exc()
        return 1


def print_system_info():
    """Print system and application information."""
    import platform

    print(f"{APP_NAME} v{APP_VERSION}")
    print(f"Python {platform.python_version()}")
    print(f"Platform: {platform.system()} {platform.release()}")
    print()


if __name__ == '__main__':
    sys.exit(main())
