"""Role schemas."""

from pydantic import BaseModel, ConfigDict, Field


class RoleCreate(BaseModel):
    name: str = Field(..., description="Role name, 3 to 64 characters once trimmed")

    model_config = ConfigDict(extra="forbid")


class RoleUpdate(RoleCreate):
    pass


class RoleRead(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)
