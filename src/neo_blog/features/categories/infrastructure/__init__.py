"""Category persistence adapters."""
