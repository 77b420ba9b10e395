"""
Comment and reply SQL queries.
"""

COMMENT_COLUMNS = "id, content, post_id, author_id, created_at, updated_at"

RESPONSE_COLUMNS = "id, content, comment_id, post_id, author_id, created_at, updated_at"

COMMENT_INSERT = f"""
    INSERT INTO comments (content, post_id, author_id, created_at, updated_at)
    VALUES ($1, $2, $3, $4, $5)
    RETURNING {COMMENT_COLUMNS}
"""

COMMENT_UPDATE = """
    UPDATE comments
    SET content = $2, updated_at = $3
    WHERE id = $1
"""

COMMENT_GET_BY_ID = f"SELECT {COMMENT_COLUMNS} FROM comments WHERE id = $1"

COMMENT_LIST_BY_POST = f"""
    SELECT {COMMENT_COLUMNS}
    FROM comments
    WHERE post_id = $1
    ORDER BY created_at ASC, id ASC
"""

# comment_responses rows go with the comment through ON DELETE CASCADE
COMMENT_DELETE = "DELETE FROM comments WHERE id = $1"

RESPONSE_INSERT = f"""
    INSERT INTO comment_responses (content, comment_id, post_id, author_id, created_at, updated_at)
    VALUES ($1, $2, $3, $4, $5, $6)
    RETURNING {RESPONSE_COLUMNS}
"""

RESPONSE_UPDATE = """
    UPDATE comment_responses
    SET content = $2, updated_at = $3
    WHERE id = $1
"""

RESPONSE_GET_BY_ID = f"SELECT {RESPONSE_COLUMNS} FROM comment_responses WHERE id = $1"

RESPONSE_LIST_BY_COMMENT = f"""
    SELECT {RESPONSE_COLUMNS}
    FROM comment_responses
    WHERE comment_id = $1
    ORDER BY created_at ASC, id ASC
"""

RESPONSE_LIST_BY_COMMENTS = f"""
    SELECT {RESPONSE_COLUMNS}
    FROM comment_responses
    WHERE comment_id = ANY($1::int[])
    ORDER BY created_at ASC, id ASC
"""

RESPONSE_DELETE = "DELETE FROM comment_responses WHERE id = $1"
