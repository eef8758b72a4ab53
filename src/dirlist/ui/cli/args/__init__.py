"""Command line argument handling package."""

from dirlist.ui.cli.args.parser import ArgumentParser
from dirlist.ui.cli.args.options import ListArgs

__all__ = ["ArgumentParser", "ListArgs"]
