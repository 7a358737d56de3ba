"""Authentication schemas for token handling."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel


class TokenData(BaseModel):
    """Data extracted from a bearer token.

    Attributes:
        user_id: The principal's UUID (``sub`` claim)
        exp: Token expiration time
        type: Token type, only "access" tokens authenticate requests
        jti: Unique token ID, if the issuer sets one
    """

    user_id: UUID
    exp: datetime
    type: str = "access"
    jti: str | None = None
