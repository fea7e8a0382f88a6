import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from apis.base import api_router
from core.config import settings
from db.playground import Session
from db.redis_session import close_redis
from db.sandbox import RunController, build_http_client
from db.snapshot import build_snapshot_store

logging.basicConfig(level=settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.session = Session.initialize(build_snapshot_store())
    client = build_http_client()
    app.state.runner = RunController(client)
    try:
        yield
    finally:
        await client.aclose()
        close_redis()


app = FastAPI(title=settings.PROJECT_NAME, version=settings.PROJECT_VERSION, lifespan=lifespan)
app.include_router(api_router)


@app.get("/")
async def read_root():
    return {"name": settings.PROJECT_NAME, "version": settings.PROJECT_VERSION}
