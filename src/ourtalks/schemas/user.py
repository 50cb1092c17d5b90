"""User-related Pydantic schemas."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class SignupRequest(BaseModel):
    """Signup submission.

    Fields are optional at the schema level so that missing or empty values
    reach the identity service and are rejected with one consistent message.
    """

    name: str | None = Field(None, description="Display name")
    email: str | None = Field(None, description="Unique email address")
    password: str | None = Field(None, description="Plaintext password, hashed before storage")


class LoginRequest(BaseModel):
    """Login submission."""

    email: str | None = Field(None, description="Registered email address")
    password: str | None = Field(None, description="Plaintext password")


class SafeUser(BaseModel):
    """Public projection of a user; never carries password material."""

    id: str = Field(
        ...,
        validation_alias=AliasChoices("id", "_id"),
        serialization_alias="_id",
        description="Store-assigned identifier",
    )
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class SignupResponse(BaseModel):
    """Response returned after a successful signup."""

    success: bool = True
    message: str = "Signup successful"
    user: SafeUser


class LoginResponse(BaseModel):
    """Response returned after a successful login."""

    success: bool = True
    user: SafeUser
