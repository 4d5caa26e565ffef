from fastapi import APIRouter, Depends, Query
import logging

from app.dependencies import get_weather_service, get_weather_alert_manager
from app.managers.weatherAlertManager import WeatherAlertManager
from app.schemas.advisory import (
    WeatherReport,
    WeatherAlertOut,
    PredictionRequest,
    PredictionResponse,
    NotificationRequest,
    NotificationResponse,
)
from app.services.notification import notification_service
from app.services.predictions import prediction_service
from app.services.weather import WeatherService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/weather/{location}", response_model=WeatherReport)
async def weather(location: str, service: WeatherService = Depends(get_weather_service)):
    """
    Current conditions and fungal-disease risk for a city.
    Falls back to typical readings when the weather API is unreachable.
    """
    return await service.report(location)


@router.get("/weather-alerts", response_model=list[WeatherAlertOut])
async def weather_alerts(
    limit: int = Query(10, ge=1, le=100),
    alerts: WeatherAlertManager = Depends(get_weather_alert_manager),
):
    return await alerts.fetch_recent(limit)


@router.post("/ai-predictions", response_model=PredictionResponse)
async def ai_predictions(payload: PredictionRequest):
    return PredictionResponse(predictions=prediction_service.predict(payload))


@router.post("/send-notification", response_model=NotificationResponse)
async def send_notification(payload: NotificationRequest):
    message = await notification_service.send(payload)
    return NotificationResponse(message=message)
