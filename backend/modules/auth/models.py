"""
Authentication module data models.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class TokenClaims(BaseModel):
    """
    Decoded payload of a verified bearer token.

    Tokens are issued elsewhere, so only the registered claims are typed.
    Any other claim embedded at issuance is kept as an extra field.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    sub: Optional[str] = Field(None, description="Subject (identity of the caller)")
    exp: Optional[float] = Field(None, description="Expiration timestamp")
    iat: Optional[float] = Field(None, description="Issued at timestamp")
