"""Categories: named buckets that posts are filed under."""
