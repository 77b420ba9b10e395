"""Post persistence adapters."""
