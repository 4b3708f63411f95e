"""Application error taxonomy

Every error that can reach a client carries the HTTP status it maps to.
The handlers registered in `gilded_desk.main` render them as
``{"error": <message>}``.
"""


class AppError(Exception):
    """Base class for errors surfaced to API clients"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """A required field is missing, blank or malformed"""
    status_code = 400


class NotFoundError(AppError):
    """No record matches the requested id"""
    status_code = 404


class AuthenticationError(AppError):
    """Webhook signature or session could not be verified"""
    status_code = 401


class OperationFailed(AppError):
    """The payment provider rejected a call; carries the provider's message"""
    status_code = 500


class StorageReadError(Exception):
    """A slot could not be read or decoded.

    Never surfaced: the store logs it and substitutes an empty collection.
    """

    def __init__(self, slot: str, reason: str):
        super().__init__(f"Failed to read slot '{slot}': {reason}")
        self.slot = slot
        self.reason = reason
