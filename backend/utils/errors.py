# backend/utils/errors.py
"""Typed failures raised by the services.

Routes never build error responses themselves; main.py maps every
PortalError subclass onto its ``status_code``.
"""


class PortalError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# Malformed or out-of-range input
class ValidationError(PortalError):
    status_code = 400


class NotFound(PortalError):
    status_code = 404


# Uniqueness violation
class Conflict(PortalError):
    status_code = 409


class Unauthorized(PortalError):
    status_code = 401


class Forbidden(PortalError):
    status_code = 403
