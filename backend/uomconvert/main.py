"""Unit Conversion Service - Main Application"""
import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from uomconvert.api.conversion import router as conversion_router
from uomconvert.api.dependencies import get_registry
from uomconvert.common.config import settings
from uomconvert.common.logging_config import configure_logging
from uomconvert.conversion import ConverterRegistry, LinearFileReader

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.app.log_level)

    registry = ConverterRegistry()
    if settings.units.load_on_startup:
        registry.add_from_files(LinearFileReader(), settings.units.data_glob)
    logger.info(f"Converter registry ready with {len(registry)} units")
    app.state.registry = registry

    yield

    registry.clear()


app = FastAPI(
    title="Unit Conversion Service",
    description="Converts values between units of measurement loaded from data files",
    version="0.1.0",
    debug=settings.app.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(conversion_router)


@app.get("/")
async def root():
    return {"message": settings.app.name, "status": "running"}


@app.get("/health")
async def health(registry: ConverterRegistry = Depends(get_registry)):
    return {"status": "healthy", "units": len(registry)}
