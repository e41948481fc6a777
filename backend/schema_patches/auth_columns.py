"""
Auth columns on the users table (camelCase, like the rest of the database)
"""
from .runner import SchemaPatch, Statement

# (column, definition)
AUTH_COLUMNS = [
    ("passwordHash", "varchar(255)"),
    ("emailVerified", "boolean DEFAULT false"),
    ("emailVerificationToken", "varchar(255)"),
    ("emailVerificationExpires", "timestamp"),
    ("passwordResetToken", "varchar(255)"),
    ("passwordResetExpires", "timestamp"),
    ("googleId", "varchar(255) UNIQUE"),
]

PATCH = SchemaPatch(
    name="auth_columns",
    description="add auth columns to users",
    statements=[
        Statement(
            label=f"users.{column}",
            sql=f'ALTER TABLE users ADD COLUMN IF NOT EXISTS "{column}" {definition}',
        )
        for column, definition in AUTH_COLUMNS
    ],
)
