# micafe/main.py
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

from micafe.config import settings
from micafe.database import Database, init_db
from micafe.exceptions import CafeError, InvalidCredentialsError, NotFoundError

load_dotenv()

# Router imports
from micafe.routes.auth import router as auth_router
from micafe.routes.admin import router as admin_router
from micafe.routes.logs import router as logs_router
from micafe.routes.cart import router as cart_router
from micafe.routes.orders import router as orders_router
from micafe.routes.products import router as products_router
from micafe.routes.shop import router as shop_router

logger = logging.getLogger(__name__)


def _status_for(exc: CafeError) -> int:
    if isinstance(exc, NotFoundError):
        return 404
    if isinstance(exc, InvalidCredentialsError):
        return 401
    # Validation rejections and anything else the caller got wrong
    return 400


async def cafe_error_handler(request: Request, exc: CafeError):
    code = _status_for(exc)
    logger.info("%s %s -> %s: %s", request.method, request.url.path, code, exc.message)
    return JSONResponse(status_code=code, content={"detail": exc.message})


def create_app(db: Optional[Database] = None) -> FastAPI:
    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    app = FastAPI(title="MiCafé API", version="1.0.0")

    # Every instance owns its state; tests pass in their own
    app.state.db = db if db is not None else init_db()

    # CORS Configuration
    origins = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]
    if settings.FRONTEND_URL and settings.FRONTEND_URL not in origins:
        origins.append(settings.FRONTEND_URL)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CafeError, cafe_error_handler)

    # Router registration
    app.include_router(auth_router)
    app.include_router(admin_router)
    app.include_router(logs_router)
    app.include_router(cart_router)
    app.include_router(orders_router)
    app.include_router(products_router)
    app.include_router(shop_router)

    @app.get("/")
    def read_root():
        return {"message": "MiCafé API is running!"}

    return app


app = create_app()
