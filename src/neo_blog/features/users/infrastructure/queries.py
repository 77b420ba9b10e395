"""
User SQL queries.
"""

USER_COLUMNS = "id, email, username, password, role, created_at, updated_at"

USER_INSERT = f"""
    INSERT INTO users (email, username, password, role, created_at, updated_at)
    VALUES ($1, $2, $3, $4, $5, $6)
    RETURNING {USER_COLUMNS}
"""

USER_UPDATE = """
    UPDATE users
    SET email = $2, username = $3, password = $4, role = $5, updated_at = $6
    WHERE id = $1
"""

USER_GET_BY_ID = f"SELECT {USER_COLUMNS} FROM users WHERE id = $1"

USER_GET_BY_EMAIL = f"SELECT {USER_COLUMNS} FROM users WHERE email = $1"

USER_GET_BY_USERNAME = f"SELECT {USER_COLUMNS} FROM users WHERE LOWER(username) = LOWER($1)"

USER_LIST = f"SELECT {USER_COLUMNS} FROM users ORDER BY id ASC"

USER_DELETE = "DELETE FROM users WHERE id = $1"
