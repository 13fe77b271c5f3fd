# This project was developed with assistance from AI tools.
"""
Keycloak bearer-token authentication and role checks.

Tokens are verified against the realm's JWKS (cached, refreshed on key
rotation). The caller's company comes from the custom ``company_id`` claim.

AUTH_DISABLED=true skips verification and acts as a dev admin bound to
DEV_COMPANY_ID.
"""

import logging
import time
from typing import Annotated

import httpx
import jwt
from db.enums import UserRole
from fastapi import Depends, HTTPException, Request, status

from ..core.config import settings
from ..schemas.auth import TokenPayload, UserContext

logger = logging.getLogger(__name__)

# Highest privilege first; a token carrying several known roles gets the first match.
_ROLE_PRECEDENCE = (
    UserRole.ADMIN,
    UserRole.COMPANY_OWNER,
    UserRole.TEAM_MEMBER,
    UserRole.USER,
)

_jwks_cache: dict = {"keys": None, "fetched_at": 0.0}


def _realm_url() -> str:
    return f"{settings.KEYCLOAK_URL}/realms/{settings.KEYCLOAK_REALM}"


def _load_jwks(force_refresh: bool = False) -> dict:
    """Return the realm's JWKS, refetching when stale or forced."""
    age = time.time() - _jwks_cache["fetched_at"]
    if _jwks_cache["keys"] is None or force_refresh or age > settings.JWKS_CACHE_TTL:
        response = httpx.get(f"{_realm_url()}/protocol/openid-connect/certs", timeout=5)
        response.raise_for_status()
        _jwks_cache["keys"] = response.json()
        _jwks_cache["fetched_at"] = time.time()
    return _jwks_cache["keys"]


def _find_key(jwks: dict, kid: str | None) -> jwt.PyJWK | None:
    for key in jwt.PyJWKSet.from_dict(jwks).keys:
        if key.key_id == kid:
            return key
    return None


def _signing_key(token: str) -> jwt.PyJWK:
    kid = jwt.get_unverified_header(token).get("kid")
    try:
        key = _find_key(_load_jwks(), kid)
        if key is None:
            # Unknown kid: the realm may have rotated keys since the last fetch
            key = _find_key(_load_jwks(force_refresh=True), kid)
    except httpx.HTTPError as exc:
        logger.error("Failed to fetch JWKS from Keycloak: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Authentication service unavailable",
        ) from exc

    if key is None:
        raise jwt.InvalidTokenError(f"No matching key found for kid={kid}")
    return key


def _bearer_token(request: Request) -> str | None:
    scheme, _, token = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token


def _decode_token(token: str) -> TokenPayload:
    claims = jwt.decode(
        token,
        _signing_key(token).key,
        algorithms=["RS256"],
        issuer=_realm_url(),
        options={"verify_aud": False},
    )
    return TokenPayload(**claims)


def _resolve_role(payload: TokenPayload) -> UserRole:
    """Pick the caller's most privileged application role.

    Keycloak built-ins (``offline_access`` and friends) are ignored.
    """
    granted = set(payload.realm_access.get("roles", []))
    for role in _ROLE_PRECEDENCE:
        if role.value in granted:
            return role
    raise HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="No recognized role assigned",
    )


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _dev_user() -> UserContext:
    return UserContext(
        user_id="dev-user",
        role=UserRole.ADMIN,
        email="dev@bidready.local",
        name="Dev User",
        company_id=settings.DEV_COMPANY_ID,
    )


async def get_current_user(request: Request) -> UserContext:
    """FastAPI dependency: authenticate the request and return its UserContext."""
    if settings.AUTH_DISABLED:
        return _dev_user()

    token = _bearer_token(request)
    if not token:
        raise _unauthorized("Missing authentication token")

    try:
        payload = _decode_token(token)
    except jwt.ExpiredSignatureError as exc:
        raise _unauthorized("Token has expired") from exc
    except jwt.InvalidTokenError as exc:
        raise _unauthorized("Invalid token") from exc

    return UserContext(
        user_id=payload.sub,
        role=_resolve_role(payload),
        email=payload.email,
        name=payload.name or payload.preferred_username,
        company_id=payload.company_id,
    )


CurrentUser = Annotated[UserContext, Depends(get_current_user)]


def require_roles(*allowed_roles: UserRole):
    """Dependency factory: only let ``allowed_roles`` through, 403 otherwise.

    Usage:
        @router.put("/", dependencies=[Depends(require_roles(UserRole.ADMIN))])
    """

    async def _check(user: CurrentUser) -> UserContext:
        if user.role not in allowed_roles:
            logger.warning(
                "RBAC denied: user=%s role=%s attempted route requiring %s",
                user.user_id,
                user.role.value,
                [r.value for r in allowed_roles],
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return user

    return _check
