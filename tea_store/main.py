# tea_store/main.py

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from tea_store.database import TeaStore
from tea_store.exceptions import TeaNotFound
from tea_store.routers import teas

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """
    Собирает приложение со своим пустым хранилищем (app.state.store).
    """
    app = FastAPI(
        title="Tea Store API",
        description="In-memory CRUD API for tea orders",
        version="1.0.0",
    )
    app.state.store = TeaStore()
    app.include_router(teas.router)

    @app.exception_handler(TeaNotFound)
    async def tea_not_found_handler(request: Request, exc: TeaNotFound):
        logger.debug("%s %s: заказ %r не найден", request.method, request.url.path, exc.tea_id)
        return PlainTextResponse(str(exc), status_code=404)

    return app


app = create_app()
