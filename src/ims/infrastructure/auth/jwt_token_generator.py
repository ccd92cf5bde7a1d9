"""HS256 JSON Web Tokens for manager sessions (PyJWT)."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt
import structlog

from ims.domain.exceptions import TokenGenerationError, UnauthorizedError
from ims.domain.model.manager import Manager
from ims.domain.ports.token_generator import TokenGenerator

logger = structlog.get_logger(__name__)

ISSUER = "inventory-manager"
AUDIENCE = "managers"
ALGORITHM = "HS256"
DEFAULT_TTL = timedelta(hours=24)


class JWTTokenGenerator(TokenGenerator):

    def __init__(self, secret_key: str, ttl: timedelta = DEFAULT_TTL) -> None:
        self._secret_key = secret_key
        self._ttl = ttl

    def generate_token(self, manager: Manager) -> str:
        issued_at = datetime.now(timezone.utc)
        claims = {
            "iss": ISSUER,
            "sub": manager.id,
            "aud": AUDIENCE,
            "iat": issued_at,
            "exp": issued_at + self._ttl,
        }
        try:
            return jwt.encode(claims, self._secret_key, algorithm=ALGORITHM)
        except (jwt.PyJWTError, TypeError, ValueError) as exc:
            raise TokenGenerationError(
                "something went wrong while generating token"
            ) from exc

    def verify_token(self, token: str) -> str:
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[ALGORITHM],
                audience=AUDIENCE,
                issuer=ISSUER,
                options={"require": ["exp", "iat", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            logger.info("token_rejected", reason="expired")
            raise UnauthorizedError("unauthorized") from None
        except jwt.InvalidTokenError as exc:
            logger.info("token_rejected", reason=type(exc).__name__)
            raise UnauthorizedError("unauthorized") from None
        return claims["sub"]
