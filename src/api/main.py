"""
FastAPI backend: local JSON endpoints consumed by the async fetch demos.
Run with uvicorn: uvicorn api.main:app --port 8010
"""

import logging
from pathlib import Path

from showcase.config import load_env_file

# Load .env from repo root (when run from repo root or from Docker)
load_env_file(Path(__file__).resolve().parent.parent.parent)

from contextlib import asynccontextmanager

from fastapi import FastAPI
from pydantic import BaseModel

from showcase.config import load_settings

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)

# Payloads per source name; "data" backs the single fetch, data1/data2 the batch.
DATASETS: dict[str, list[int]] = {
    "data": [1, 2, 3, 4, 5],
    "data1": [2, 4, 6],
    "data2": [1, 3, 5],
}


class DataPayload(BaseModel):
    source: str
    items: list[int]
    total: int


def _payload(source: str) -> DataPayload:
    items = DATASETS[source]
    return DataPayload(source=source, items=list(items), total=sum(items))


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = load_settings()
    logger.info(
        "Demo data API ready. Point SHOWCASE_API_BASE_URL here (currently %s).",
        settings.api_base_url,
    )
    yield


app = FastAPI(title="Showcase demo data API", lifespan=lifespan)


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


# --- REST: data ---


@app.get("/data", response_model=DataPayload)
def get_data():
    return _payload("data")


@app.get("/data1", response_model=DataPayload)
def get_data1():
    return _payload("data1")


@app.get("/data2", response_model=DataPayload)
def get_data2():
    return _payload("data2")
