# app/main.py
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from app.api.deps import RateLimitExceeded
from app.api.routers import auth, users, cart, orders, products, health
from app.data.database import Base, init_db
from app.utils.settings import CORS_ORIGINS, PORT
from app.utils.logging import get_logger

logger = get_logger(__name__)

RATE_LIMIT_BODY = {
    "status": 429,
    "error": "Too many requests, please try again later.",
}


async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(status_code=429, content=RATE_LIMIT_BODY)


async def validation_handler(request: Request, exc: RequestValidationError):
    errors = [
        {
            "field": ".".join(str(p) for p in err["loc"] if p != "body"),
            "message": err["msg"],
        }
        for err in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"detail": "Validation failed", "errors": errors})


async def unhandled_handler(request: Request, exc: Exception):
    logger.exception(f"Nieobsluzony blad {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"detail": str(exc)})


def create_app() -> FastAPI:
    logger.info("Inicjalizacja bazy danych...")
    init_db()
    logger.info(f"Tabele: {list(Base.metadata.tables.keys())}")

    app = FastAPI(
        title="Storefront API",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed = (time.perf_counter() - started) * 1000
        logger.info(f"{request.method} {request.url.path} {response.status_code} {elapsed:.1f} ms")
        return response

    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)
    app.add_exception_handler(RequestValidationError, validation_handler)
    app.add_exception_handler(Exception, unhandled_handler)

    # Include routers
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(cart.router)
    app.include_router(orders.router)
    app.include_router(products.router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=PORT)
