"""Posts: authored articles with a draft/published lifecycle."""
