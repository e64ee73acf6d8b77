import logging
import re
from datetime import datetime, timezone
from typing import Callable, List, Union

from pymongo import DESCENDING
from pymongo.errors import DuplicateKeyError

from models.request import INT64_MAX, NftCreateRequest
from models.response import NftRecord
from .errors import ConflictError, InvalidArgumentError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

INT64_MIN = -(2**63)
NFT_ID_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def parse_nft_id(nft_id: Union[int, str]) -> int:
    """Parse a base-10 NFT ID that fits a BSON int64."""
    if isinstance(nft_id, bool):
        raise InvalidArgumentError()
    if isinstance(nft_id, int):
        value = nft_id
    else:
        text = str(nft_id).strip()
        if not NFT_ID_PATTERN.fullmatch(text):
            raise InvalidArgumentError()
        value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        raise InvalidArgumentError()
    return value


class NftRepository:
    """Create and read operations on the `nfts` collection."""

    def __init__(self, collection, clock: Callable[[], datetime] = _utcnow):
        self.collection = collection
        self.clock = clock

    async def ensure_indexes(self) -> None:
        await self.collection.create_index("nftId", unique=True, name="nftId_unique")
        await self.collection.create_index(
            [("userWalletAddress", 1), ("createdAt", DESCENDING)],
            name="wallet_gallery",
        )

    async def create(self, payload: NftCreateRequest) -> NftRecord:
        # The unique index still guards concurrent inserts that both pass this lookup.
        if await self.collection.find_one({"nftId": payload.nft_id}) is not None:
            raise ConflictError()

        document = {
            "nftId": payload.nft_id,
            "name": payload.name,
            "description": payload.description,
            "logoUrl": payload.logo_url,
            "userWalletAddress": payload.user_wallet_address,
            "createdAt": self.clock(),
        }
        try:
            result = await self.collection.insert_one(document)
        except DuplicateKeyError:
            raise ConflictError()

        document["_id"] = result.inserted_id
        return NftRecord.from_document(document)

    async def get_by_id(self, nft_id: Union[int, str]) -> NftRecord:
        parsed = parse_nft_id(nft_id)
        document = await self.collection.find_one({"nftId": parsed})
        if document is None:
            raise NotFoundError()
        return NftRecord.from_document(document)

    async def list_by_wallet(self, wallet_address: str) -> List[NftRecord]:
        if not wallet_address:
            raise ValidationError("Wallet address is required")

        cursor = self.collection.find({"userWalletAddress": wallet_address}).sort(
            "createdAt", DESCENDING
        )
        documents = await cursor.to_list(length=None)
        logger.debug(f"Found {len(documents)} NFTs for wallet {wallet_address}")
        return [NftRecord.from_document(document) for document in documents]
