import logging
from datetime import datetime, timezone
from typing import Optional

import httpx
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type, RetryError

from app.config import init_settings
from app.constants.weather import CITY_COORDS, FALLBACK_READINGS, DEFAULT_CITY, RISK_MESSAGES
from app.exceptions import ErrorCode, PersistenceError, UpstreamUnavailable
from app.managers.weatherAlertManager import WeatherAlertManager
from app.schemas.advisory import WeatherReport

logger = logging.getLogger(__name__)
settings = init_settings()


def assess_risk(temperature: float, humidity: float) -> str:
    """
    High   -> humid (> 80 %) and warm (> 25 °C): fungal weather
    Medium -> humid (> 70 %) or hot (> 30 °C)
    Low    -> everything else
    """
    if humidity > 80 and temperature > 25:
        return "high"
    if humidity > 70 or temperature > 30:
        return "medium"
    return "low"


class WeatherService:
    def __init__(
            self,
            alerts: WeatherAlertManager,
            base_url: str = settings.WEATHER_API_URL,
            timeout: float = settings.WEATHER_TIMEOUT,
            max_attempts: int = settings.WEATHER_MAX_ATTEMPTS,
            transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.alerts = alerts
        self.base_url = base_url
        self.timeout = timeout
        self.max_attempts = max_attempts
        self.transport = transport

    @staticmethod
    def city_key(location: str) -> str:
        key = location.strip().lower()
        return key if key in CITY_COORDS else DEFAULT_CITY

    async def _request(self, lat: float, lon: float) -> tuple[float, float]:
        params = {
            "latitude": lat,
            "longitude": lon,
            "current": "temperature_2m,relative_humidity_2m",
            "hourly": "temperature_2m,relative_humidity_2m",
            "timezone": settings.WEATHER_TIMEZONE,
        }
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            resp = await client.get(self.base_url, params=params)
        resp.raise_for_status()
        current = resp.json()["current"]
        return float(current["temperature_2m"]), float(current["relative_humidity_2m"])

    async def fetch_current(self, location: str) -> tuple[float, float]:
        """Live (temperature, humidity) for a city; UpstreamUnavailable on any failure."""
        lat, lon = CITY_COORDS[self.city_key(location)]
        fetch = retry(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=4),
            retry=retry_if_exception_type((httpx.TransportError, httpx.HTTPStatusError)),
        )(self._request)
        try:
            return await fetch(lat, lon)
        except (RetryError, httpx.HTTPError, KeyError, TypeError, ValueError) as e:
            raise UpstreamUnavailable(ErrorCode.WEATHER_UNAVAILABLE, location=location) from e

    @staticmethod
    def fallback_reading(location: str) -> tuple[float, float]:
        key = location.strip().lower()
        return FALLBACK_READINGS.get(key, FALLBACK_READINGS[DEFAULT_CITY])

    async def report(self, location: str) -> WeatherReport:
        source = "live"
        try:
            temperature, humidity = await self.fetch_current(location)
        except UpstreamUnavailable as e:
            logger.warning(f"⚠️  Weather API failed, using fallback data for {location}: {e.__cause__!r}")
            temperature, humidity = self.fallback_reading(location)
            source = "fallback"

        risk_level = assess_risk(temperature, humidity)
        alert_message = RISK_MESSAGES[risk_level]

        if risk_level != "low":
            try:
                await self.alerts.create({
                    "location": location,
                    "temperature": temperature,
                    "humidity": humidity,
                    "risk_level": risk_level,
                    "alert_message": alert_message,
                })
            except PersistenceError as e:
                logger.error(f"Weather alert for {location} not stored: {e}")

        return WeatherReport(
            location=location,
            temperature=temperature,
            humidity=humidity,
            riskLevel=risk_level,
            alertMessage=alert_message,
            timestamp=datetime.now(timezone.utc),
            source=source,
        )
