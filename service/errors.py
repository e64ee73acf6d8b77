class NftServiceError(Exception):
    """Base class for errors that map onto an HTTP error envelope."""

    status_code: int = 500
    default_message: str = "An unexpected error occurred"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(NftServiceError):
    status_code = 400
    default_message = "Invalid input data"


class InvalidArgumentError(ValidationError):
    default_message = "Invalid NFT ID format"


class ConflictError(NftServiceError):
    status_code = 400
    default_message = "NFT with this ID already exists"


class NotFoundError(NftServiceError):
    status_code = 404
    default_message = "NFT not found"


class StoreUnavailableError(NftServiceError):
    status_code = 500
    default_message = "Database connection not established"


class InternalError(NftServiceError):
    status_code = 500
