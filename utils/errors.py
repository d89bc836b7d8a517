"""
Typed errors raised by services and routes.

Each carries the HTTP status it maps to; the handlers registered in
app.create_app turn them into {"error": ...} responses.
"""


class HRMSError(Exception):
    status_code = 500

    def __init__(self, message, status_code=None, details=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details


class ValidationError(HRMSError):
    status_code = 400


class StateTransitionError(HRMSError):
    """Illegal status change, e.g. approving a claim that is still a draft."""
    status_code = 400


class AuthenticationError(HRMSError):
    status_code = 401


class AuthorizationError(HRMSError):
    status_code = 403


class NotFoundError(HRMSError):
    status_code = 404


class ConflictError(HRMSError):
    status_code = 409
