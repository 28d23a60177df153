"""
offdict artifact host.

    uvicorn offdict.server.main:app --port 8000
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from offdict.core.config import get_settings
from offdict.core.logging_config import configure_logging
from offdict.server.deps import get_artifact_path
from offdict.server.routes import dictionary


logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("artifact_host_started", artifact=settings.artifact_path)
    yield


app = FastAPI(title="offdict", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(dictionary.router)


class HostInfo(BaseModel):
    name: str
    version: str
    built: bool


@app.get("/", response_model=HostInfo)
async def root():
    return HostInfo(name="offdict", version="0.1.0", built=get_artifact_path().is_file())
