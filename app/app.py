import logging
from datetime import datetime, timezone
from typing import Optional

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from app.config import init_settings
from app.database import engine as default_engine
from app.exceptions.handlers import register_exception_handlers
from app.managers.reportManager import ReportManager
from app.managers.userProfileManager import UserProfileManager
from app.managers.weatherAlertManager import WeatherAlertManager
from app.routers.v1.advisory import router as advisory_router
from app.routers.v1.detection import router as detection_router
from app.routers.v1.economics import router as economics_router
from app.routers.v1.reference import router as reference_router
from app.routers.v1.translation import router as translation_router
from app.schemas.advisory import HealthResponse
from app.services.classifier import classifier
from app.services.image import image_service
from app.services.ingestion import IngestionPipeline
from app.services.storage import UploadStorage
from app.services.treatment import treatment_service
from app.services.weather import WeatherService

logger = logging.getLogger(__name__)
settings = init_settings()


def create_app(
        engine: Optional[AsyncEngine] = None,
        upload_dir: Optional[str] = None,
        weather_transport: Optional[httpx.AsyncBaseTransport] = None,
        weather_max_attempts: Optional[int] = None,
) -> FastAPI:
    engine = engine or default_engine
    storage = UploadStorage(upload_dir or settings.UPLOAD_DIR, settings.MAX_UPLOAD_BYTES, settings.UPLOAD_URL_PREFIX)
    storage.ensure_dir()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.state.engine = engine
    app.state.report_manager = ReportManager(engine)
    app.state.weather_alert_manager = WeatherAlertManager(engine)
    app.state.user_profile_manager = UserProfileManager(engine)
    app.state.pipeline = IngestionPipeline(
        classifier=classifier,
        treatments=treatment_service,
        reports=app.state.report_manager,
        storage=storage,
        images=image_service,
    )
    app.state.weather_service = WeatherService(
        app.state.weather_alert_manager,
        max_attempts=weather_max_attempts or settings.WEATHER_MAX_ATTEMPTS,
        transport=weather_transport,
    )

    @app.on_event("startup")
    async def startup():
        # tables are normally created by alembic; create_all is a no-op for existing ones
        await app.state.report_manager.init_db()
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info("✅ Database connected successfully")

    @app.on_event("shutdown")
    async def shutdown():
        await engine.dispose()

    app.include_router(detection_router, prefix=settings.API_PREFIX, tags=["detection"])
    app.include_router(economics_router, prefix=settings.API_PREFIX, tags=["economics"])
    app.include_router(advisory_router, prefix=settings.API_PREFIX, tags=["advisory"])
    app.include_router(reference_router, prefix=settings.API_PREFIX, tags=["reference"])
    app.include_router(translation_router, prefix=settings.API_PREFIX)

    app.mount(storage.url_prefix, StaticFiles(directory=storage.upload_dir), name="uploads")

    @app.get(f"{settings.API_PREFIX}/health", response_model=HealthResponse)
    async def health_check():
        return HealthResponse(status="OK", timestamp=datetime.now(timezone.utc))

    return app


app = create_app()
