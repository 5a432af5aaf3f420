# app/models/user.py
import uuid
from sqlalchemy import Column, String, DateTime, Uuid, func
from app.core.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(String(length=320), unique=True, index=True, nullable=False)
    # bcrypt hash, never the plain password
    password = Column(String(length=255), nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<User email={self.email}>"
