import unittest

import httpx
from sqlalchemy.ext.asyncio import create_async_engine

from app.constants.weather import RISK_MESSAGES
from app.exceptions import ErrorCode, PersistenceError, UpstreamUnavailable
from app.managers.weatherAlertManager import WeatherAlertManager
from app.services.weather import WeatherService, assess_risk

WEATHER_URL = "https://weather.test/v1/forecast"


def reading(temperature, humidity):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={
            "current": {"temperature_2m": temperature, "relative_humidity_2m": humidity},
        })
    return handler


def server_error(request: httpx.Request) -> httpx.Response:
    return httpx.Response(503, json={"reason": "maintenance"})


class FailingAlertManager:
    async def create(self, data):
        raise PersistenceError(ErrorCode.DB_WRITE_FAILED, "weather_alerts")


class TestAssessRisk(unittest.TestCase):
    def test_thresholds(self):
        cases = [
            (26, 81, "high"),
            (25, 90, "medium"),   # not warm enough for high, humid enough for medium
            (20, 75, "medium"),
            (31, 40, "medium"),
            (30, 70, "low"),
            (15, 50, "low"),
        ]
        for temperature, humidity, expected in cases:
            with self.subTest(temperature=temperature, humidity=humidity):
                self.assertEqual(assess_risk(temperature, humidity), expected)


class TestWeatherService(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.engine = create_async_engine('sqlite+aiosqlite:///:memory:')
        self.alerts = WeatherAlertManager(self.engine)
        await self.alerts.init_db()

    async def asyncTearDown(self):
        await self.engine.dispose()

    def service(self, handler, alerts=None, max_attempts=1) -> WeatherService:
        return WeatherService(
            alerts or self.alerts,
            base_url=WEATHER_URL,
            timeout=1,
            max_attempts=max_attempts,
            transport=httpx.MockTransport(handler),
        )

    async def test_live_high_risk_records_alert(self):
        report = await self.service(reading(30, 85)).report("Mumbai")
        self.assertEqual(report.source, "live")
        self.assertEqual(report.riskLevel, "high")
        self.assertEqual(report.alertMessage, RISK_MESSAGES["high"])
        self.assertEqual((report.temperature, report.humidity), (30, 85))

        alerts = await self.alerts.fetch_recent()
        self.assertEqual(len(alerts), 1)
        self.assertEqual(alerts[0].location, "Mumbai")
        self.assertEqual(alerts[0].risk_level, "high")

    async def test_low_risk_records_nothing(self):
        report = await self.service(reading(20, 50)).report("Delhi")
        self.assertEqual(report.riskLevel, "low")
        self.assertEqual(await self.alerts.fetch_recent(), [])

    async def test_city_coordinates(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(dict(request.url.params))
            return reading(20, 50)(request)

        service = self.service(handler)
        await service.report("Bangalore")
        await service.report("Atlantis")
        self.assertEqual(seen[0]["latitude"], "12.9716")
        self.assertEqual(seen[1]["latitude"], "19.076")  # unknown cities resolve to mumbai
        self.assertEqual(seen[0]["current"], "temperature_2m,relative_humidity_2m")

    async def test_upstream_failure_uses_fallback(self):
        report = await self.service(server_error).report("Delhi")
        self.assertEqual(report.source, "fallback")
        self.assertEqual((report.temperature, report.humidity), (32, 65))
        self.assertEqual(report.riskLevel, "medium")
        self.assertEqual(len(await self.alerts.fetch_recent()), 1)

    async def test_unknown_city_fallback_is_mumbai(self):
        report = await self.service(server_error).report("Atlantis")
        self.assertEqual(report.location, "Atlantis")
        self.assertEqual((report.temperature, report.humidity), (28, 85))

    async def test_malformed_payload_uses_fallback(self):
        def handler(request):
            return httpx.Response(200, json={"hourly": {}})

        report = await self.service(handler).report("Pune")
        self.assertEqual(report.source, "fallback")

    async def test_fetch_current_raises_upstream_unavailable(self):
        with self.assertRaises(UpstreamUnavailable) as ctx:
            await self.service(server_error).fetch_current("Pune")
        self.assertIsInstance(ctx.exception.__cause__, Exception)
        self.assertEqual(ctx.exception.message, "Weather service unavailable for Pune")

    async def test_transient_error_is_retried(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            if len(calls) == 1:
                raise httpx.ConnectError("connection refused", request=request)
            return reading(22, 60)(request)

        report = await self.service(handler, max_attempts=2).report("Pune")
        self.assertEqual(len(calls), 2)
        self.assertEqual(report.source, "live")

    async def test_alert_store_failure_still_reports(self):
        report = await self.service(reading(30, 85), alerts=FailingAlertManager()).report("Chennai")
        self.assertEqual(report.riskLevel, "high")


if __name__ == "__main__":
    unittest.main()
