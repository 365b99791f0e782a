"""Package marker file."""
