"""Command line argument options."""

from dataclasses import dataclass
from typing import final

from dirlist.features.listing import ListingConfig


@final
@dataclass(slots=True)
class ListArgs:
    """Command line arguments for a listing run."""

    paths: list[str]
    show_hidden: bool
    long_format: bool
    recursive: bool
    count_only: bool
    verbose: bool
    quiet: bool

    def to_listing_config(self) -> ListingConfig:
        """Return the engine configuration for these arguments."""

        return ListingConfig(
            show_hidden=self.show_hidden,
            long_format=self.long_format,
            recursive=self.recursive,
            count_only=self.count_only,
        ).resolved()


__all__ = ["ListArgs"]
