class ServiceError(Exception):
    """Domain failure a controller can turn into an error response."""

    status = 400

    def __init__(self, code: str, message: str):
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message


class NotFoundError(ServiceError):
    status = 404


class ConflictError(ServiceError):
    status = 409
