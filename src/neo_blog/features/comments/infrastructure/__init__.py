"""Comment persistence adapters."""
