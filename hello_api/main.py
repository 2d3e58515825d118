# hello_api/main.py

import logging
import socket
import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hello_api.core.config import Settings, get_settings
from hello_api.core.logging import configure_logging
from hello_api.routers import hello, root

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 註冊路由：root 是 catch-all，一定要放最後
    app.include_router(hello.router)
    app.include_router(root.router)

    return app


app = create_app()


def _bind(host: str, port: int) -> socket.socket:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    return sock


def run(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    logger.info("Running on port %s", settings.PORT)

    try:
        sock = _bind(settings.HOST, settings.PORT)
    except OSError as e:
        logger.error("error starting server: %s", e)
        sys.exit(1)

    config = uvicorn.Config(create_app(settings), log_level=settings.LOG_LEVEL.lower())
    server = uvicorn.Server(config)
    try:
        server.run(sockets=[sock])
    except KeyboardInterrupt:
        pass
    finally:
        sock.close()

    if not server.started:
        logger.error("error starting server: startup did not complete")
        sys.exit(1)

    logger.info("server closed")


if __name__ == "__main__":
    run()
