from sqlalchemy import Column, Integer, String, DateTime, func
from ppe_tracker.database import Base


class Manager(Base):
    __tablename__ = "manager"

    id = Column(Integer, primary_key=True, autoincrement=True)
    last_name = Column(String(100), nullable=False)
    first_name = Column(String(100), nullable=False)
    email = Column(String(150), nullable=False, unique=True, index=True)

    # Stored credentials
    password_hash = Column(String(255), nullable=False)
    password_salt = Column(String(64), nullable=False)

    created_at = Column(DateTime, server_default=func.now())
