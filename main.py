import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError

from config import HOST, PORT, SQLALCHEMY_DATABASE_URL
from database import TodoStore
from domain.todo.todo_router import router as todo_router

logger = logging.getLogger(__name__)


def create_app(database_url: Optional[str] = None) -> FastAPI:
    store = TodoStore(database_url or SQLALCHEMY_DATABASE_URL)

    # 서버 시작 시 DB를 열고 종료 시 닫는다
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store.open()
        app.state.store = store
        try:
            yield
        finally:
            store.close()

    app = FastAPI(title='BETH ToDo', version='1.0.0', lifespan=lifespan)

    # 422는 FastAPI 기본 응답 그대로, 로그만 남긴다
    @app.exception_handler(RequestValidationError)
    async def log_validation_error(request: Request, exc: RequestValidationError):
        logger.warning('Rejected %s %s: %s', request.method, request.url.path, exc.errors())
        return await request_validation_exception_handler(request, exc)

    # /, /todos 라우트를 앱에 등록.
    app.include_router(todo_router)
    return app


if __name__ == '__main__':
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    logger.info('Serving todos at http://%s:%s', HOST, PORT)
    uvicorn.run(create_app(), host=HOST, port=PORT)
