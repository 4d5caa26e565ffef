import io
import os
import tempfile
import unittest
from unittest.mock import AsyncMock, patch

import httpx
from fastapi.testclient import TestClient
from PIL import Image

from app.app import create_app
from app.database import build_engine
from app.exceptions import ErrorCode, PersistenceError
from app.services.knowledge import knowledge_service
from app.services.notification import notification_service


def png_bytes() -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (16, 16), "green").save(buf, format="PNG")
    return buf.getvalue()


def humid_mumbai(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"current": {"temperature_2m": 30, "relative_humidity_2m": 85}})


class TestRoutes(unittest.TestCase):
    def setUp(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.upload_dir = os.path.join(tmp.name, "uploads")

        engine = build_engine(f"sqlite+aiosqlite:///{os.path.join(tmp.name, 'test.db')}", echo=False)
        self.app = create_app(
            engine=engine,
            upload_dir=self.upload_dir,
            weather_transport=httpx.MockTransport(humid_mumbai),
            weather_max_attempts=1,
        )
        self.client = self.enterContext(TestClient(self.app))

    def detect(self, **form):
        return self.client.post(
            "/api/detect-disease",
            files={"image": ("leaf.png", png_bytes(), "image/png")},
            data=form,
        )

    def test_health(self):
        response = self.client.get("/api/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "OK")
        self.assertIn("timestamp", response.json())

    def test_detect_disease(self):
        response = self.detect(email="farmer@example.com", location="Pune")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["status"], "complete")
        self.assertTrue(body["recorded"])
        self.assertEqual(body["category"], body["disease"].split(" ")[0])
        self.assertTrue(0 <= body["confidence"] <= 100)
        self.assertEqual(set(body["treatment"]), {"organic", "prevention", "severity", "urgency"})
        self.assertTrue(body["imagePath"].startswith("/uploads/"))
        self.assertTrue(os.path.exists(os.path.join(self.upload_dir, os.path.basename(body["imagePath"]))))

        # imagePath is the URL the file is served back under
        served = self.client.get(body["imagePath"])
        self.assertEqual(served.status_code, 200)
        self.assertEqual(served.content, png_bytes())

        history = self.client.get("/api/disease-history/farmer@example.com").json()
        self.assertEqual(len(history), 1)
        self.assertEqual(history[0]["disease_prediction"], body["disease"])
        self.assertEqual(history[0]["id"], body["reportId"])

        stats = self.client.get("/api/analytics/disease-stats").json()
        self.assertEqual(stats, [{
            "disease_prediction": body["disease"],
            "count": 1,
            "avg_confidence": body["confidence"],
            "severity": body["severity"],
        }])

    def test_detect_disease_without_image(self):
        response = self.client.post("/api/detect-disease", data={"email": "farmer@example.com"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "No image file provided"})

    def test_detect_disease_rejects_non_images(self):
        response = self.client.post(
            "/api/detect-disease",
            files={"image": ("notes.txt", b"not a leaf", "text/plain")},
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Only image files are allowed!"})

    def test_detect_disease_partial_success(self):
        failure = PersistenceError(ErrorCode.DB_WRITE_FAILED, "disease_reports")
        with patch.object(self.app.state.report_manager, "insert", AsyncMock(side_effect=failure)):
            response = self.detect()
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "partial_success")
        self.assertFalse(response.json()["recorded"])
        self.assertIsNone(response.json()["reportId"])

    def test_read_failure_is_500(self):
        failure = PersistenceError(ErrorCode.DB_READ_FAILED, "disease_reports")
        with patch.object(self.app.state.report_manager, "aggregate_by_disease", AsyncMock(side_effect=failure)):
            response = self.client.get("/api/analytics/disease-stats")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "Failed to read disease_reports records"})

    def test_unhandled_error_is_opaque(self):
        client = TestClient(self.app, raise_server_exceptions=False)
        with patch.object(self.app.state.pipeline, "run", AsyncMock(side_effect=RuntimeError("secret detail"))):
            response = client.post("/api/detect-disease")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "Internal server error"})

    def test_economic_impact(self):
        response = self.client.post("/api/economic-impact", json={
            "disease": "Tomato Late Blight", "cropType": "Tomato", "farmSize": 10, "currentYield": 5.5,
        })
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["yieldLossPct"], 60)
        self.assertEqual(body["revenueLoss"], 5.94)
        self.assertEqual(body["treatmentCost"], 1500)

    def test_economic_impact_healthy_has_null_roi(self):
        response = self.client.post("/api/economic-impact", json={
            "disease": "Apple Healthy", "cropType": "Apple", "farmSize": 2, "currentYield": 8,
        })
        self.assertIsNone(response.json()["roi"])

    def test_economic_impact_missing_field(self):
        response = self.client.post("/api/economic-impact", json={"disease": "Apple Scab", "cropType": "Apple"})
        self.assertEqual(response.status_code, 400)
        self.assertTrue(response.json()["error"].startswith("Invalid request"))
        self.assertIn("farmSize", response.json()["error"])

    def test_economic_impact_overflow(self):
        response = self.client.post("/api/economic-impact", json={
            "disease": "Tomato Late Blight", "cropType": "Tomato", "farmSize": 1e308, "currentYield": 5.5,
        })
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "farmSize and currentYield are out of range"})

    def test_economic_impact_non_finite_input(self):
        for value in ("NaN", "Infinity", "-Infinity"):
            with self.subTest(farmSize=value):
                response = self.client.post(
                    "/api/economic-impact",
                    content='{"disease": "Tomato Late Blight", "cropType": "Tomato", '
                            f'"farmSize": {value}, "currentYield": 5.5}}',
                    headers={"content-type": "application/json"},
                )
                self.assertEqual(response.status_code, 400)
                self.assertIn("farmSize", response.json()["error"])

    def test_reference_lookups(self):
        prices = self.client.get("/api/market-prices/unknownfruit").json()
        self.assertEqual(prices["prices"], {"current": 30, "weekly": 28, "monthly": 32, "trend": "stable"})

        planner = self.client.get("/api/crop-planner/unknowncrop").json()
        self.assertEqual(planner["crop"], "unknowncrop")
        self.assertEqual(planner["planner"], knowledge_service.get_planner("rice"))

        knowledge = self.client.get("/api/knowledge-base").json()
        self.assertTrue(knowledge["success"])
        self.assertIn("tips", knowledge["knowledge"])

    def test_weather_and_alerts(self):
        response = self.client.get("/api/weather/Mumbai")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["riskLevel"], "high")
        self.assertEqual(response.json()["source"], "live")

        alerts = self.client.get("/api/weather-alerts", params={"limit": 5}).json()
        self.assertEqual(len(alerts), 1)
        self.assertEqual(alerts[0]["risk_level"], "high")

        self.assertEqual(self.client.get("/api/weather-alerts", params={"limit": 0}).status_code, 400)

    def test_ai_predictions(self):
        response = self.client.post("/api/ai-predictions", json={
            "disease": "Apple Scab", "weather": {"temperature": 30, "humidity": 85},
        })
        self.assertEqual(response.status_code, 200)
        predictions = response.json()["predictions"]
        self.assertEqual(predictions["spreadProbability"], 0.8)
        self.assertEqual(len(predictions["timeline"]), 5)

    def test_send_notification(self):
        with patch.object(notification_service, "delay_seconds", 0):
            response = self.client.post("/api/send-notification", json={
                "email": "farmer@example.com", "subject": "Alert", "message": "Blight risk is high",
            })
            missing = self.client.post("/api/send-notification", json={"email": "farmer@example.com"})
        self.assertEqual(response.json(), {"success": True, "message": "Notification sent successfully"})
        self.assertEqual(missing.status_code, 400)
        self.assertEqual(missing.json(), {"error": "Email, subject, and message are required"})

    def test_translate(self):
        response = self.client.post("/api/translate", json={"text": "Hello", "targetLang": "en"})
        self.assertEqual(response.json()["translatedText"], "Hello")
        self.assertEqual(self.client.post("/api/translate", json={"text": "Hello", "targetLang": "xx"}).status_code, 400)

    def test_unknown_route_is_flat_error(self):
        response = self.client.get("/api/does-not-exist")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"error": "Not Found"})


if __name__ == "__main__":
    unittest.main()
