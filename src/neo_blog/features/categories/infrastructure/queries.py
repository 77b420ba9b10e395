"""
Category SQL queries.
"""

CATEGORY_INSERT = """
    INSERT INTO categories (name)
    VALUES ($1)
    RETURNING id, name
"""

CATEGORY_UPDATE = """
    UPDATE categories SET name = $2
    WHERE id = $1
    RETURNING id, name
"""

CATEGORY_GET_BY_ID = "SELECT id, name FROM categories WHERE id = $1"

CATEGORY_GET_BY_NAME = "SELECT id, name FROM categories WHERE LOWER(name) = LOWER($1)"

CATEGORY_LIST = "SELECT id, name FROM categories ORDER BY name ASC"

CATEGORY_DELETE = "DELETE FROM categories WHERE id = $1"
