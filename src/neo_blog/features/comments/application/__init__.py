"""Comment and reply use cases."""
