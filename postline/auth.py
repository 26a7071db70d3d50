from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt, ExpiredSignatureError
from postline.config import settings
from postline.constants.roles import Roles, parse_roles
from postline.exceptions import AuthenticationError
import logging

logger = logging.getLogger(__name__)


@dataclass
class TokenData:
    user_id: str
    roles: list[Roles] = field(default_factory=list)


# Function to create an access token with an expiration time
def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    if "sub" not in to_encode:
        raise ValueError("Missing 'sub' claim (user id) in token data.")

    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode.update({"exp": expire})
    if "roles" in to_encode:
        to_encode["roles"] = [getattr(role, "value", role) for role in to_encode["roles"]]

    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


# Function to decode an access token
def decode_access_token(token: str) -> TokenData:
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except ExpiredSignatureError:
        logger.warning("Token expired")
        raise AuthenticationError("Token has expired")
    except JWTError as e:
        logger.warning(f"JWT decoding failed: {str(e)}")
        raise AuthenticationError("Invalid token")

    user_id = payload.get("sub")
    if user_id is None:
        logger.warning("Token is missing 'sub' claim")
        raise AuthenticationError("Token does not contain 'sub' field.")

    return TokenData(user_id=str(user_id), roles=parse_roles(payload.get("roles")))


def token_from_authorization(header: str | None) -> TokenData | None:
    """Decode a ``Bearer`` authorization header; ``None`` means anonymous."""
    if not header:
        return None
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise AuthenticationError("Malformed authorization header")
    return decode_access_token(token.strip())
