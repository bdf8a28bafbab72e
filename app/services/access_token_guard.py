# app/services/access_token_guard.py
from typing import Optional, Union

from fastapi import Header, HTTPException
from pydantic import BaseModel, ConfigDict

BEARER_PREFIX = "Bearer "
INVALID_TOKEN_MESSAGE = "Missing or invalid access token"


class BearerToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str


class AuthFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    reason: str = INVALID_TOKEN_MESSAGE


TokenResult = Union[BearerToken, AuthFailure]


def extract_bearer_token(authorization: Optional[str]) -> TokenResult:
    """
    解析 Authorization: Bearer <Spotify access token>
    這裡只檢查格式，token 是否有效交給 Spotify 判斷。
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return AuthFailure()

    token = authorization.split(" ")[1]
    if not token:
        return AuthFailure()

    return BearerToken(value=token)


def require_access_token(authorization: Optional[str] = Header(None)) -> str:
    result = extract_bearer_token(authorization)

    if isinstance(result, AuthFailure):
        raise HTTPException(status_code=401, detail=result.reason)

    return result.value
