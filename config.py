import os
from urllib.parse import quote_plus

from dotenv import load_dotenv

load_dotenv()


class Config:
    PORT: int = int(os.getenv("PORT", "5000"))
    HOST: str = os.getenv("HOST", "0.0.0.0")

    DB_USER: str = os.getenv("DB_USER", "")
    DB_PASS: str = os.getenv("DB_PASS", "")
    DB_HOST: str = os.getenv("DB_HOST", "cluster0.xd8rz.mongodb.net")
    DB_NAME: str = os.getenv("DB_NAME") or "nft-database"
    MONGODB_URI: str = os.getenv("MONGODB_URI", "")

    DB_CONNECT_RETRIES: int = int(os.getenv("DB_CONNECT_RETRIES", "5"))
    DB_CONNECT_DELAY: float = float(os.getenv("DB_CONNECT_DELAY", "5"))

    NFT_COLLECTION: str = "nfts"

    CORS_ORIGINS: list = [
        origin.strip()
        for origin in os.getenv(
            "CORS_ORIGINS",
            "http://localhost:5173,http://127.0.0.1:5173,https://mint-nft-cytric.web.app",
        ).split(",")
        if origin.strip()
    ]
    CORS_METHODS: list = ["GET", "POST", "OPTIONS"]
    CORS_HEADERS: list = ["Content-Type", "Authorization"]

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_DIR: str = os.getenv("LOG_DIR", ".")

    @classmethod
    def mongo_uri(cls) -> str:
        if cls.MONGODB_URI:
            return cls.MONGODB_URI
        user = quote_plus(cls.DB_USER)
        password = quote_plus(cls.DB_PASS)
        return (
            f"mongodb+srv://{user}:{password}@{cls.DB_HOST}/{cls.DB_NAME}"
            "?retryWrites=true&w=majority"
        )
