"""dirlist: list directory contents and file metadata."""

__version__ = "0.1.0"
