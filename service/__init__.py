from .errors import (
    ConflictError,
    InternalError,
    InvalidArgumentError,
    NftServiceError,
    NotFoundError,
    StoreUnavailableError,
    ValidationError,
)
from .nft_repository import NftRepository
from .store import MongoStore

__all__ = [
    "ConflictError",
    "InternalError",
    "InvalidArgumentError",
    "NftServiceError",
    "NotFoundError",
    "StoreUnavailableError",
    "ValidationError",
    "NftRepository",
    "MongoStore",
]
