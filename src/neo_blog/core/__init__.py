"""Shared domain kernel: identifiers, base entity, events, errors and collaborator protocols."""
