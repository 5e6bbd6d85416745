"""Command-line entry points for Knight Zones."""
