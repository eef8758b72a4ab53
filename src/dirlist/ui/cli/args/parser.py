"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import final

from dirlist.config import Config, ConfigError
from dirlist.platform.logging import logger, setup_logger
from dirlist.ui.cli.args.options import ListArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="dirlist",
            description="List files: directory contents and file metadata, like ls.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        _ = parser.add_argument(
            "paths",
            nargs="*",
            metavar="PATH",
            help="Files or directories to list (defaults to the current directory)",
        )
        _ = parser.add_argument(
            "-1",
            dest="one_per_line",
            action="store_true",
            help="List one entry per line (always the case; accepted for compatibility)",
        )
        _ = parser.add_argument(
            "-a",
            dest="show_hidden",
            action="store_true",
            help="Include hidden files and the . and .. pseudo-directories",
        )
        _ = parser.add_argument(
            "-l",
            dest="long_format",
            action="store_true",
            help="Show permissions, links, owner, group, size and modification time",
        )
        _ = parser.add_argument(
            "-R",
            dest="recursive",
            action="store_true",
            help="List subdirectories recursively",
        )
        _ = parser.add_argument(
            "-n",
            dest="count_only",
            action="store_true",
            help="Print only the number of entries that would be listed (overrides -l)",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show diagnostic details such as skipped entries",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress error messages; the exit status still reports failures",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> ListArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            ListArgs: Processed command line arguments.

        Raises:
            SystemExit: On usage errors, ``--help``, or an unreadable config file.
        """
        parser = ArgumentParser.create_parser()
        # Paths and flags may interleave, as with ls.
        parsed_args = parser.parse_intermixed_args(args_list)

        if parsed_args.quiet:
            log_level = logging.CRITICAL
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        try:
            configuration = Config.load()
        except ConfigError as e:
            logger.error("%s", e)
            sys.exit(2)
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        return ListArgs(
            paths=list(parsed_args.paths),
            show_hidden=parsed_args.show_hidden,
            long_format=parsed_args.long_format,
            recursive=parsed_args.recursive,
            count_only=parsed_args.count_only,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
