from .request import NftCreateRequest, REQUIRED_FIELDS
from .response import (
    ApiResponse,
    ErrorResponse,
    HealthResponse,
    NftGalleryResponse,
    NftRecord,
    NftResponse,
)

__all__ = [
    "NftCreateRequest",
    "REQUIRED_FIELDS",
    "ApiResponse",
    "ErrorResponse",
    "HealthResponse",
    "NftGalleryResponse",
    "NftRecord",
    "NftResponse",
]
