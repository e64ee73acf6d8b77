import logging

from fastapi import APIRouter, Depends, Request, status
from pymongo.errors import PyMongoError

from config import Config
from models.request import NftCreateRequest
from models.response import NftGalleryResponse, NftResponse
from service.errors import InternalError
from service.nft_repository import NftRepository
from . import docs

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/nft", tags=["nft"])


def get_repository(request: Request) -> NftRepository:
    store = request.app.state.store
    return NftRepository(store.collection(Config.NFT_COLLECTION))


@router.post(
    "/store",
    response_model=NftResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    **docs.STORE_NFT,
)
async def store_nft(
    payload: NftCreateRequest,
    repository: NftRepository = Depends(get_repository),
):
    try:
        record = await repository.create(payload)
    except PyMongoError as e:
        logger.error(f"Error storing NFT: {e}", exc_info=True)
        raise InternalError("Internal server error while storing NFT") from e

    logger.info(f"NFT data stored successfully for ID: {record.nft_id}")
    return NftResponse(message="NFT data stored successfully", data=record)


@router.get(
    "/gallery/{wallet_address}",
    response_model=NftGalleryResponse,
    response_model_exclude_none=True,
    **docs.GET_GALLERY,
)
async def get_gallery(
    wallet_address: str,
    repository: NftRepository = Depends(get_repository),
):
    try:
        records = await repository.list_by_wallet(wallet_address)
    except PyMongoError as e:
        logger.error(f"Error retrieving NFT gallery: {e}", exc_info=True)
        raise InternalError("Internal server error while retrieving NFT gallery") from e

    logger.info(f"NFT gallery retrieved for wallet: {wallet_address} ({len(records)} items)")
    return NftGalleryResponse(data=records)


@router.get(
    "/{nft_id}",
    response_model=NftResponse,
    response_model_exclude_none=True,
    **docs.GET_NFT,
)
async def get_nft(
    nft_id: str,
    repository: NftRepository = Depends(get_repository),
):
    try:
        record = await repository.get_by_id(nft_id)
    except PyMongoError as e:
        logger.error(f"Error retrieving NFT: {e}", exc_info=True)
        raise InternalError("Internal server error while retrieving NFT") from e

    logger.info(f"NFT data retrieved for ID: {record.nft_id}")
    return NftResponse(data=record)
