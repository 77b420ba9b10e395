"""Users: accounts, roles and credentials."""
