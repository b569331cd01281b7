class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when credentials or the bearer token are missing or wrong."""


class InvalidTokenError(AuthenticationError):
    """Raised when a bearer token is malformed, tampered with or expired."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a session, user or roster entry does not exist."""


class SessionNotFoundError(NotFoundError):
    """No active session matches the submitted code."""


class SessionEndedError(SessionNotFoundError):
    """The code belongs to a session that has already ended.

    Only raised when distinct session errors are switched on; otherwise the
    ended case is reported as a plain ``SessionNotFoundError``.
    """
