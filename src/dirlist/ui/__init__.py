"""User interface layers for dirlist."""
