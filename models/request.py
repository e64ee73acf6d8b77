from pydantic import BaseModel, ConfigDict, Field

REQUIRED_FIELDS = ["nftId", "name", "description", "logoUrl", "userWalletAddress"]

# BSON stores integers as at most 8 bytes.
INT64_MAX = 2**63 - 1


class NftCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    nft_id: int = Field(..., alias="nftId", gt=0, le=INT64_MAX)
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    logo_url: str = Field(..., alias="logoUrl", min_length=1)
    user_wallet_address: str = Field(..., alias="userWalletAddress", min_length=1)
