class ValidatorError(Exception):
    def __init__(self, message: str, status_code: int):
        """
        Base exception for rejected validation requests.

        Args:
            message (str): The error message returned to the client.
            status_code (int): The HTTP status code associated with the error.
        """
        super().__init__(message)

        self.message = message
        self.status_code = status_code


class MethodNotAllowed(ValidatorError):
    def __init__(self, message: str = "Only POST"):
        super().__init__(message, 405)


class InvalidInput(ValidatorError):
    def __init__(self, message: str = "Missing parameters: id, guess"):
        super().__init__(message, 400)


class SignatureInvalid(ValidatorError):
    def __init__(self, message: str = "Invalid signature"):
        super().__init__(message, 401)


class RecordNotFound(ValidatorError):
    def __init__(self, message: str = "ID not registered"):
        super().__init__(message, 404)


class CatalogLoadError(Exception):
    """Raised when the catalog asset is missing or malformed."""
