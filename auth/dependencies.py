"""
FastAPI dependency functions for authentication.

`AuthGate` is installed as an application-wide dependency, so every route is
protected unless its endpoint is marked with `@public`. Handlers that need to
know who is calling declare `principal: Principal = Depends(gate)`; FastAPI
caches dependency results per request, so the gate still runs only once.

Per-request flow:
    public route          -> admit, principal is None
    no Authorization      -> 401 "Authorization Header value not provided"
    empty or undecodable  -> 401 "Incorrect credentials provided"
    unknown user/mismatch -> 401 "Incorrect credentials provided"
    match                 -> admit with Principal(user_id, username)
"""

import logging
from typing import Any, Callable, Optional, TypeVar

from fastapi import Request, Security
from fastapi.security import APIKeyHeader

from restaurant_explorer.storage.base import BaseUserStore, StorageError

from .config import AUTH_HEADER, INCORRECT_CREDENTIALS, MISSING_HEADER
from .schemas import Principal
from .service import Unauthenticated, authenticate_user
from .utils import MalformedHeaderError, decode_credentials

log = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

_PUBLIC_ATTR = "__allow_anonymous__"

# Declared as an API-key header (not HTTPBasic) so the raw value reaches our own
# codec untouched; Swagger still shows an "Authorize" field for it.
authorization_header = APIKeyHeader(
    name=AUTH_HEADER,
    auto_error=False,
    scheme_name="basic",
    description="Basic Authentication. Format: 'Basic ' + base64(username:password).",
)


def public(endpoint: F) -> F:
    """
    Mark a route endpoint as reachable without credentials.

    Apply it *below* the route decorator so the router registers the marked
    function:

        @app.get("/api/restaurant/{restaurant_id}")
        @public
        def get_restaurant(...): ...
    """
    setattr(endpoint, _PUBLIC_ATTR, True)
    return endpoint


def is_public(endpoint: Optional[Callable[..., Any]]) -> bool:
    return bool(getattr(endpoint, _PUBLIC_ATTR, False))


class AuthGate:
    """Request-level admission control backed by a user store."""

    def __init__(self, users: BaseUserStore):
        self.users = users

    def __call__(
        self,
        request: Request,
        authorization: Optional[str] = Security(authorization_header),
    ) -> Optional[Principal]:
        if is_public(request.scope.get("endpoint")):
            return None

        if authorization is None:
            # APIKeyHeader reports an empty value as None too; only absence is "not provided".
            if AUTH_HEADER in request.headers:
                log.info("Rejected %s %s: empty Authorization header", request.method, request.url.path)
                raise Unauthenticated(INCORRECT_CREDENTIALS)
            log.info("Rejected %s %s: no Authorization header", request.method, request.url.path)
            raise Unauthenticated(MISSING_HEADER)

        try:
            username, password = decode_credentials(authorization)
        except MalformedHeaderError as exc:
            log.info("Rejected %s %s: %s", request.method, request.url.path, exc)
            raise Unauthenticated(INCORRECT_CREDENTIALS) from exc

        try:
            return authenticate_user(self.users, username, password)
        except StorageError as exc:
            log.exception("User lookup failed while authenticating %r", username)
            raise Unauthenticated(INCORRECT_CREDENTIALS) from exc
