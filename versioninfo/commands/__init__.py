"""Command handlers for the versioninfo CLI."""
