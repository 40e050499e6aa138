from fastapi import status


class ServiceError(ValueError):
    """Base class for errors raised by the service layer.

    Each subclass carries the HTTP status the API boundary answers with.
    """
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputValidationError(ServiceError):
    """Malformed or missing input, including unique-constraint violations"""
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class InvalidStateError(ServiceError):
    """Action not permitted in the entity's current state"""
    status_code = status.HTTP_400_BAD_REQUEST


class ForbiddenError(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN
