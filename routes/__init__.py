from .health import router as health_router
from .nft import router as nft_router

__all__ = [
    "health_router",
    "nft_router",
]
