from typing import Mapping


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class InputValidationError(CustomBaseError):
    """Carries every failing field at once, keyed by the field name the client sent."""

    def __init__(self, fields: Mapping[str, str], message: str = 'Validation failed') -> None:
        self.fields = dict(fields)
        super().__init__(message, 400)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str = 'Not authenticated') -> None:
        super().__init__(message, 401)


class ForbiddenError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class InvalidTransitionError(ConflictError):
    pass


class NotEligibleError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 422)


class LoginError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class RecipientUnresolvableError(CustomBaseError):
    """The offer owner cannot be notified; the client only sees a generic failure."""

    public_message = 'Unable to process the reservation right now'

    def __init__(self, message: str) -> None:
        super().__init__(message, 500)


class PersistenceError(CustomBaseError):
    public_message = 'Temporary storage failure, please retry'

    def __init__(self, message: str) -> None:
        super().__init__(message, 503)


class NotificationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 502)
