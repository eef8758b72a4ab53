"""Feature packages for dirlist."""
