"""Static OpenAPI descriptions for every route, passed to the route decorators."""
from models.response import ErrorResponse

API_INFO = {
    "title": "NFT API",
    "version": "1.0.0",
    "description": "API for NFT minting and management",
}

DOCS_URL = "/api-docs"
REDOC_URL = "/api-redoc"


def servers(port: int) -> list:
    return [{"url": f"http://localhost:{port}", "description": "Development server"}]


def _error(description: str) -> dict:
    return {"model": ErrorResponse, "description": description}


HEALTH_CHECK = {
    "summary": "Health check endpoint",
    "description": "Returns the status of the API and database connection",
    "response_description": "API is running successfully",
}

STORE_NFT = {
    "summary": "Store NFT data",
    "description": "Stores the provided NFT data in the database",
    "response_description": "NFT data stored successfully",
    "responses": {
        400: _error("Invalid input data or duplicate NFT ID"),
        500: _error("Server error"),
    },
}

GET_NFT = {
    "summary": "Get NFT by ID",
    "description": "Retrieves NFT data using the numeric NFT ID",
    "response_description": "NFT data retrieved successfully",
    "responses": {
        400: _error("Invalid NFT ID format"),
        404: _error("NFT not found"),
        500: _error("Server error"),
    },
}

GET_GALLERY = {
    "summary": "Get NFT Gallery",
    "description": "Retrieves all NFTs owned by a specific wallet address, newest first",
    "response_description": "NFT gallery retrieved successfully (possibly empty)",
    "responses": {
        500: _error("Server error"),
    },
}
