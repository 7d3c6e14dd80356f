# agro/interfaces/api/main.py
from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from agro.infrastructure.config import get_settings


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from agro.infrastructure.duckdb_connection import get_connection, init_schema
    from agro.infrastructure.log import log

    init_schema(get_connection())  # valida conexao e garante schema no startup
    log("API pronta")
    yield


app = FastAPI(
    title="Brain Agriculture API",
    debug=get_settings().debug,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_methods=["GET", "POST", "PATCH", "DELETE"],
    allow_headers=["*"],
)

# Routers
from agro.interfaces.api.routes.document_routes import router as document_router  # noqa: E402
from agro.interfaces.api.routes.farm_routes import router as farm_router  # noqa: E402
from agro.interfaces.api.routes.health_routes import router as health_router  # noqa: E402
from agro.interfaces.api.routes.producer_routes import router as producer_router  # noqa: E402

app.include_router(health_router, prefix="/api")
app.include_router(document_router, prefix="/api")
app.include_router(producer_router, prefix="/api")
app.include_router(farm_router, prefix="/api")
