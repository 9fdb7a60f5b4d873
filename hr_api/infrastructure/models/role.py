"""SQLAlchemy model for job roles."""

from sqlalchemy import Column, Integer, String

from hr_api.infrastructure.database import Base


class RoleModel(Base):
    """Database representation of a job role."""

    __tablename__ = "role"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(64), nullable=False, unique=True)


__all__ = ["RoleModel"]
