import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load .env file from the project root
# This file: src/docqa/config/settings.py
SERVER_ROOT = Path(__file__).resolve().parent.parent.parent.parent
ENV_PATH = SERVER_ROOT / ".env"

if ENV_PATH.exists():
    load_dotenv(ENV_PATH)
else:
    # Fallback to simple load_dotenv which looks in cwd
    load_dotenv()


class Settings(BaseModel):
    """Global Application Settings"""

    # Environment
    ENV: str = Field(default="development", description="Environment: development, production, testing")
    LOG_LEVEL: str = Field(default="INFO", description="Log level")

    # Project Paths
    ROOT_DIR: Path = Field(default=SERVER_ROOT, description="Project root directory")

    # Retrieval
    EMBEDDING_DIMENSION: int = Field(default=384, gt=0, description="Embedding vector dimension")
    EMBEDDING_CACHE_SIZE: int = Field(default=10000, ge=0, description="Memoized embeddings (0 = unbounded)")
    DEFAULT_TOP_K: int = Field(default=5, ge=1, description="Chunks retrieved per query")

    model_config = {
        "frozen": True,
        "arbitrary_types_allowed": True
    }


def load_settings() -> Settings:
    """Load settings from environment variables."""
    return Settings(
        ENV=os.getenv("ENV", "development"),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
        ROOT_DIR=SERVER_ROOT,
        EMBEDDING_DIMENSION=int(os.getenv("EMBEDDING_DIMENSION", "384")),
        EMBEDDING_CACHE_SIZE=int(os.getenv("EMBEDDING_CACHE_SIZE", "10000")),
        DEFAULT_TOP_K=int(os.getenv("DEFAULT_TOP_K", "5")),
    )


# Global settings instance
settings = load_settings()
