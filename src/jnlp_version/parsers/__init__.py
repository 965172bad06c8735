"""Text-level parsing of version-ids and version strings."""
