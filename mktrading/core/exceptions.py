"""
Application error taxonomy

Each error carries the HTTP status the API layer answers with and a message
that is safe to show to the client.
"""


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message}


class ValidationError(AppError):
    """Missing or invalid required field"""
    status_code = 400


class AuthError(AppError):
    """Missing, invalid or expired credentials"""
    status_code = 401


class NotFoundError(AppError):
    status_code = 404


class StoreError(AppError):
    """Connectivity or constraint failure in the relational store"""
    status_code = 500

    def __init__(self, message: str = "Database error"):
        super().__init__(message)
