from fastapi import Request

from app.managers.reportManager import ReportManager
from app.managers.weatherAlertManager import WeatherAlertManager
from app.services.ingestion import IngestionPipeline
from app.services.weather import WeatherService


# Process-wide collaborators are built once in create_app() and kept on app.state.

def get_report_manager(request: Request) -> ReportManager:
    return request.app.state.report_manager


def get_weather_alert_manager(request: Request) -> WeatherAlertManager:
    return request.app.state.weather_alert_manager


def get_pipeline(request: Request) -> IngestionPipeline:
    return request.app.state.pipeline


def get_weather_service(request: Request) -> WeatherService:
    return request.app.state.weather_service
