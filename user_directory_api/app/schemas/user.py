"""
Pydantic models for user data.

JSON field names are camelCase (``firstName``, ``lastName``,
``fullName``) while Python attributes stay snake_case; the mapping is
done with field aliases.  Request payloads are checked by
:func:`~user_directory_api.app.services.validation.validate_user_payload`
before they are turned into a ``UserCreate``.
"""

from pydantic import BaseModel, Field

from ..models.user import User


class UserBase(BaseModel):
    username: str = Field(..., examples=["johndoe"])
    email: str = Field(..., examples=["john.doe@example.com"])
    first_name: str = Field(..., alias="firstName", examples=["John"])
    last_name: str = Field(..., alias="lastName", examples=["Doe"])
    active: bool = Field(True, examples=[True])

    model_config = {
        "populate_by_name": True,
    }


class UserCreate(UserBase):
    """Schema for creating or fully replacing a user.

    Unknown keys, including an ``id`` echoed back by a client, are
    ignored: the store assigns identifiers.  On creation ``active`` is
    ignored as well and the user starts active; on update it replaces
    the stored value.
    """

    def to_record(self) -> User:
        return User(
            username=self.username,
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            active=self.active,
        )


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: int
    full_name: str = Field(..., alias="fullName")

    @classmethod
    def from_record(cls, user: User) -> "UserRead":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            active=user.active,
            full_name=user.full_name,
        )


class UserStats(BaseModel):
    """Aggregate user counts returned by ``GET /users/stats``."""

    total_users: int = Field(..., alias="totalUsers")
    active_users: int = Field(..., alias="activeUsers")
    inactive_users: int = Field(..., alias="inactiveUsers")

    model_config = {
        "populate_by_name": True,
    }
