"""
Lowkeese API Server.
"""

import logging
import uvicorn
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from lowkeese.core.config import settings
from lowkeese.server.routes import translate, dictionary


logging.basicConfig(level=settings().LOG_LEVEL, format="%(levelname)s:%(name)s:%(message)s")
log = logging.getLogger(__name__)


def log_routes(app: FastAPI):
    routes = []
    for route in app.routes:
        if isinstance(route, APIRoute):
            methods = ", ".join(route.methods - {"HEAD", "OPTIONS"})
            routes.append((methods, route.path, route.name))

    routes.sort(key=lambda r: (r[1], r[0]))

    for methods, path, name in routes:
        log.info("  %-8s %-40s → %s", methods, path, name)


@asynccontextmanager
async def lifespan(app: FastAPI):
    log_routes(app)
    yield


app = FastAPI(title="Lowkeese API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(translate.router)
app.include_router(dictionary.router)


@app.get("/")
async def root():
    return {"name": "Lowkeese API", "version": "0.1.0"}


def serve():
    cfg = settings()
    uvicorn.run("lowkeese.server.main:app", host=cfg.HOST, port=cfg.PORT)
