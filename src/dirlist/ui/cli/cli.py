"""Command line interface for dirlist."""

import logging
import os
import sys
from collections.abc import Sequence
from typing import final

from dirlist.config import Config
from dirlist.features.listing import ListingOutputPort, ListingRunner
from dirlist.platform.filesystem import OsFileSystem
from dirlist.platform.logging import logger
from dirlist.ui.cli.args import ArgumentParser
from dirlist.ui.cli.display import ConsoleListingOutput

EXIT_INTERRUPTED = 130


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(
        args_list: Sequence[str] | None = None,
        output: ListingOutputPort | None = None,
    ) -> int:
        """Process command line arguments and run the listing.

        Args:
            args_list: List of command line arguments (for testing).
            output: Sink for listing lines. Defaults to stdout.

        Returns:
            int: Exit status assembled from the run's error bits.
        """
        args = ArgumentParser.process_args(args_list)
        configuration = Config.load()

        runner = ListingRunner(
            args.to_listing_config(),
            OsFileSystem(),
            output or ConsoleListingOutput(),
            program_name=configuration.program_name,
        )

        try:
            status = runner.run(args.paths)
            sys.stdout.flush()
        except KeyboardInterrupt:
            logger.log(logging.INFO, "Listing cancelled by user")
            return EXIT_INTERRUPTED
        except BrokenPipeError:
            # Reader closed the pipe, e.g. ``dirlist -R / | head``.
            logger.log(logging.DEBUG, "Output closed by reader; stopping listing")
            _discard_stdout()
            return runner.status.exit_code

        return status.exit_code


def _discard_stdout() -> None:
    """Point stdout at the null device so the exit-time flush cannot fail again."""

    try:
        stdout_fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, stdout_fd)
    os.close(devnull)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit status (0 when every entry was listed).
    """
    return CommandProcessor.process_command()
