class ServiceError(Exception):
    """Base class for errors the API turns into a 4xx response."""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError):
    status_code = 404


class InvalidReferenceError(ServiceError):
    """A foreign key in the request body points to a row that does not exist."""
    status_code = 400


class ReferenceConflictError(ServiceError):
    """The row is still referenced by other rows and cannot be deleted."""
    status_code = 409


class DuplicateError(ServiceError):
    status_code = 409
