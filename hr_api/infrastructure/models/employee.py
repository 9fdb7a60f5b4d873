"""SQLAlchemy model for the employee table."""

from sqlalchemy import Column, ForeignKey, Integer, SmallInteger, String
from sqlalchemy.orm import relationship

from hr_api.infrastructure.database import Base


class EmployeeModel(Base):
    """Database representation of an employee."""

    __tablename__ = "employee"

    id = Column(Integer, primary_key=True, index=True)
    role_id = Column(
        Integer,
        ForeignKey("role.id", ondelete="NO ACTION", onupdate="NO ACTION"),
        nullable=False,
        index=True,
    )
    name = Column(String(128), nullable=False)
    email = Column(String(64), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    commutes_by_allowance = Column(SmallInteger, nullable=False, default=0)
    role = relationship("RoleModel", lazy="joined")


__all__ = ["EmployeeModel"]
