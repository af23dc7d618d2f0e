"""Auth request/response schemas (documentation only for the request side)."""

from pydantic import BaseModel, Field


class Credentials(BaseModel):
    """
    Body of POST /auth/register and POST /auth/login.

    Not used for validation: users have no schema beyond the presence checks
    the controller makes before writing.
    """

    email: str = Field(examples=["jane@example.com"])
    password: str = Field(examples=["s3cret"])


class TokenResponse(BaseModel):
    token: str = Field(description="Signed JWT to send as 'Authorization: Bearer <token>'")
    tokenType: str = Field(default="Bearer")
    expiresIn: int = Field(description="Seconds until the token expires")
