"""Shared infrastructure adapters: event bus, database pool, security."""
