"""Employee schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StrictInt

from .role import RoleRead


class RoleReference(BaseModel):
    # JSON booleans and numeric strings are not identifiers.
    id: StrictInt = Field(..., description="Identifier of an existing role")


class EmployeeCreate(BaseModel):
    name: str
    email: EmailStr
    password: str = Field(..., description="Plain password, hashed before storage")
    commutes_by_allowance: StrictInt = Field(
        ..., description="1 when the employee receives a commuting allowance, otherwise 0"
    )
    role: RoleReference

    model_config = ConfigDict(extra="forbid")


class EmployeeUpdate(BaseModel):
    name: str | None = None
    email: EmailStr | None = None
    password: str | None = None
    commutes_by_allowance: StrictInt | None = None
    role: RoleReference | None = None

    model_config = ConfigDict(extra="forbid")


class EmployeeRead(BaseModel):
    id: int
    name: str
    email: str
    commutes_by_allowance: int
    role: RoleRead

    model_config = ConfigDict(from_attributes=True)
