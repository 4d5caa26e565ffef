import sqlalchemy as db

from app.managers.base import BaseSchema, GenericManager


# Placeholder table: kept in the schema for future profile features, no flow writes it yet.
class UserProfileSchema(BaseSchema):
    __tablename__ = "user_profiles"

    email = db.Column(db.String(255), unique=True, nullable=False)
    name = db.Column(db.String(255), nullable=True)
    location = db.Column(db.String(255), nullable=True)
    preferred_language = db.Column(db.String(10), default="en", server_default="en")
    notification_enabled = db.Column(db.Boolean, default=True, server_default=db.true())
    created_at = db.Column(db.DateTime, server_default=db.func.current_timestamp(), nullable=False)


class UserProfileManager(GenericManager[UserProfileSchema]):
    pass


__all__ = [
    "UserProfileSchema", "UserProfileManager",
]
