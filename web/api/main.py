"""FastAPI comment API - exposes the user and comment stores over HTTP."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
from sentiment.services import Storage
from web.api.auth_routes import router as auth_router
from web.api.routes import router as api_router

logger = logging.getLogger("sentiment.web")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Comment API ready (capacity %d per store)", config.MAX_RECORDS)
    yield


app = FastAPI(title="Sentiment Comment API", lifespan=lifespan)
# In-memory only: everything is lost when the process exits
app.state.storage = Storage.create()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(api_router)
app.include_router(auth_router)
