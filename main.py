import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware
from core.config_loader import settings
from core.database import Base, engine
from core.error_handlers import register_error_handlers
from core.observability import setup_logging

from employee.router import employee_router
import models_bootstrap

logger = logging.getLogger(__name__)

openapi_tags = [
    {
        "name": "Employees",
        "description": "Employee record operations",
    },
    {
        "name": "Health Checks",
        "description": "Application health checks",
    }
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    if settings.CREATE_TABLES_ON_STARTUP:
        Base.metadata.create_all(bind=engine)
    logger.info("Employee API started")
    yield
    logger.info("Employee API shutting down")


app = FastAPI(title="Employee API", openapi_tags=openapi_tags, lifespan=lifespan)

if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            str(origin).strip("/") for origin in settings.BACKEND_CORS_ORIGINS
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_error_handlers(app)

app.include_router(employee_router, prefix="/api")


@app.get("/health", tags=['Health Checks'])
def read_root():
    return {"health": "true"}
