from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class NftRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    record_id: str = Field(..., alias="_id")
    nft_id: int = Field(..., alias="nftId")
    name: str
    description: str
    logo_url: str = Field(..., alias="logoUrl")
    user_wallet_address: str = Field(..., alias="userWalletAddress")
    created_at: datetime = Field(..., alias="createdAt")

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "NftRecord":
        """Build a record from a raw `nfts` document, rendering the ObjectId as hex."""
        return cls.model_validate({**document, "_id": str(document["_id"])})


class ApiResponse(BaseModel):
    status: str = Field(default="success")
    message: Optional[str] = None


class ErrorResponse(ApiResponse):
    status: str = Field(default="error")
    message: str


class NftResponse(ApiResponse):
    data: NftRecord


class NftGalleryResponse(ApiResponse):
    data: List[NftRecord]


class HealthResponse(BaseModel):
    status: str = Field(default="success")
    message: str
    database: str
