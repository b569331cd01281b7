from __future__ import annotations

from functools import wraps

from flask import g, request

from .tokens import TokenClaims, TokenService


def current_user() -> TokenClaims:
    return g.current_user


def build_token_required(tokens: TokenService):
    """Decorator that verifies the bearer token and stores its claims on ``g``.

    Failures are raised as domain errors and turned into JSON responses by the
    app-level error handlers. Role checks stay in the services.
    """

    def token_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            token = TokenService.from_authorization_header(request.headers.get("Authorization"))
            g.current_user = tokens.verify(token)
            return view(*args, **kwargs)

        return wrapper

    return token_required
