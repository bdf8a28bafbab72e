from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


# Spotify /api/token (authorization_code) 回傳中我們需要的欄位
class TokenGrant(BaseModel):
    access_token: str = Field(min_length=1)
    refresh_token: str = Field(min_length=1)
    expires_in: int = Field(gt=0)


# /auth/refresh_token 回傳給前端的內容
class RefreshTokenResponse(BaseModel):
    access_token: str = Field(min_length=1)
    expires_in: int = Field(gt=0)


# top tracks / top artists 的統計區間
class TimeRange(str, Enum):
    SHORT_TERM = "short_term"
    MEDIUM_TERM = "medium_term"
    LONG_TERM = "long_term"

    @classmethod
    def parse(cls, value: Optional[str]) -> "TimeRange":
        """不合法或沒給 → medium_term"""
        try:
            return cls(value)
        except ValueError:
            return cls.MEDIUM_TERM
