"""Category use cases."""
