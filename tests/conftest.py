"""
Pytest fixtures for the NFT metadata service. MongoDB is replaced by mongomock-motor.
"""

import os
import tempfile

os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="nft-logs-"))

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from service.nft_repository import NftRepository
from service.store import MongoStore

WALLET = "0xabc"


def nft_payload(nft_id=1, wallet=WALLET, **overrides):
    payload = {
        "nftId": nft_id,
        "name": f"NFT #{nft_id}",
        "description": f"Description of NFT #{nft_id}",
        "logoUrl": f"http://example.com/{nft_id}.png",
        "userWalletAddress": wallet,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def mongo_client():
    return AsyncMongoMockClient()


@pytest.fixture
def store(mongo_client):
    return MongoStore(
        uri="mongodb://localhost:27017",
        db_name="nft-test",
        client_factory=lambda *args, **kwargs: mongo_client,
        max_attempts=1,
        delay=0,
    )


@pytest_asyncio.fixture
async def repository(mongo_client):
    repo = NftRepository(mongo_client["nft-test"]["nfts"])
    await repo.ensure_indexes()
    return repo


@pytest.fixture
def app(store):
    from main import create_app

    return create_app(store=store)


@pytest.fixture
def client(app):
    """TestClient with the lifespan running, so the store is connected."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_payload():
    return nft_payload
