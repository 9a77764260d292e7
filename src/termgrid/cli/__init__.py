"""Command-line interface: palette listing and interactive demos."""
