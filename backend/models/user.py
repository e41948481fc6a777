"""
User model - core account table backing the auth flow
"""
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, Enum, Index, func
from backend.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    open_id = Column("openId", String(64), unique=True)
    name = Column(Text)
    email = Column(String(320), unique=True)
    login_method = Column("loginMethod", String(64))
    role = Column(Enum("user", "admin", name="role"), server_default="user", nullable=False)

    # Auth columns (backend.schema_patches.auth_columns)
    password_hash = Column("passwordHash", String(255))
    email_verified = Column("emailVerified", Boolean, server_default="false")
    email_verification_token = Column("emailVerificationToken", String(255))
    email_verification_expires = Column("emailVerificationExpires", DateTime)
    password_reset_token = Column("passwordResetToken", String(255))
    password_reset_expires = Column("passwordResetExpires", DateTime)
    google_id = Column("googleId", String(255), unique=True)

    api_key = Column("apiKey", String(128), unique=True)
    organization_id = Column("organizationId", Integer)
    stripe_customer_id = Column("stripeCustomerId", String(255))

    # Timestamps
    created_at = Column("createdAt", DateTime, server_default=func.now(), nullable=False)
    updated_at = Column("updatedAt", DateTime, server_default=func.now(), nullable=False)
    last_signed_in = Column("lastSignedIn", DateTime, server_default=func.now(), nullable=False)

    __table_args__ = (
        Index("organization_idx", "organizationId"),
        Index("email_idx", "email"),
    )

    def __repr__(self):
        return f"<User {self.id} ({self.email})>"
