"""Feature packages, one per aggregate plus authentication."""
