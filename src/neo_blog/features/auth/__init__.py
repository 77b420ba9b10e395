"""Login, registration and bearer token handling."""
