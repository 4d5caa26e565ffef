import unittest

from sqlalchemy.ext.asyncio import create_async_engine

from app.exceptions import PersistenceError
from app.managers.reportManager import ReportManager, DiseaseReportSchema, HISTORY_LIMIT
from app.managers.userProfileManager import UserProfileManager
from app.managers.weatherAlertManager import WeatherAlertManager


def report(disease="Apple Scab", confidence=85, email=None, **extra) -> dict:
    data = {
        "image_path": "uploads/1700000000000-leaf.jpg",
        "disease_prediction": disease,
        "confidence": confidence,
        "severity": "moderate",
        "category": disease.split(" ")[0],
        "user_email": email,
        "location": None,
    }
    data.update(extra)
    return data


class ManagerTestCase(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        """Fresh in-memory database for each test."""
        self.engine = create_async_engine('sqlite+aiosqlite:///:memory:')
        self.reports = ReportManager(self.engine)
        self.alerts = WeatherAlertManager(self.engine)
        self.profiles = UserProfileManager(self.engine)
        await self.reports.init_db()

    async def asyncTearDown(self):
        await self.engine.dispose()


class TestReportManager(ManagerTestCase):
    async def test_insert(self):
        """Test inserting a report returns its id."""
        first = await self.reports.insert(report())
        second = await self.reports.insert(report())
        self.assertIsInstance(first, int)
        self.assertGreater(second, first)

        stored = await self.reports.fetch(first)
        self.assertEqual(stored.disease_prediction, "Apple Scab")
        self.assertEqual(stored.category, "Apple")
        self.assertIsNotNone(stored.timestamp)

    async def test_query_by_email(self):
        """Newest first, capped, only the requested email."""
        ids = [await self.reports.insert(report(email="farmer@example.com")) for _ in range(HISTORY_LIMIT + 2)]
        await self.reports.insert(report(email="other@example.com"))

        history = await self.reports.query_by_email("farmer@example.com")
        self.assertEqual(len(history), HISTORY_LIMIT)
        self.assertTrue(all(r.user_email == "farmer@example.com" for r in history))
        self.assertEqual([r.id for r in history], sorted(ids, reverse=True)[:HISTORY_LIMIT])

        self.assertEqual(await self.reports.query_by_email("nobody@example.com"), [])

    async def test_aggregate_by_disease(self):
        for _ in range(3):
            await self.reports.insert(report("Apple Scab", 85))
        await self.reports.insert(report("Corn Healthy", 88, severity="none"))

        stats = await self.reports.aggregate_by_disease()
        self.assertEqual(len(stats), 2)
        self.assertEqual(stats[0]["disease_prediction"], "Apple Scab")
        self.assertEqual(stats[0]["count"], 3)
        self.assertAlmostEqual(stats[0]["avg_confidence"], 85)
        self.assertEqual(stats[0]["severity"], "moderate")
        self.assertEqual(stats[1]["count"], 1)

    async def test_aggregate_empty(self):
        self.assertEqual(await self.reports.aggregate_by_disease(), [])

    async def test_reports_are_immutable(self):
        """Test updating a stored report is rejected."""
        report_id = await self.reports.insert(report())
        async with self.reports.session_factory() as session:
            record = await self.reports.fetch(report_id, session=session)
            record.disease_prediction = "Apple Healthy"
            with self.assertRaises(ValueError):
                await session.flush()

        stored = await self.reports.fetch(report_id)
        self.assertEqual(stored.disease_prediction, "Apple Scab")

    async def test_out_of_range_confidence_is_a_persistence_error(self):
        with self.assertRaises(PersistenceError) as ctx:
            await self.reports.insert(report(confidence=150))
        self.assertEqual(ctx.exception.tablename, "disease_reports")
        self.assertEqual(ctx.exception.as_dict(), {"error": "Failed to write disease_reports record"})

    async def test_pydantic_model(self):
        report_id = await self.reports.insert(report(email="farmer@example.com"))
        stored = await self.reports.fetch(report_id)
        model = DiseaseReportSchema.__model__.model_validate(stored)
        self.assertEqual(model.user_email, "farmer@example.com")
        self.assertNotIn("timestamp", stored.model_dump("timestamp"))


class TestWeatherAlertManager(ManagerTestCase):
    async def test_fetch_recent(self):
        for risk in ("medium", "high", "high"):
            await self.alerts.create({
                "location": "Pune",
                "temperature": 31,
                "humidity": 82,
                "risk_level": risk,
                "alert_message": f"{risk} risk",
            })

        recent = await self.alerts.fetch_recent(limit=2)
        self.assertEqual(len(recent), 2)
        self.assertGreater(recent[0].id, recent[1].id)
        self.assertEqual(len(await self.alerts.fetch_recent()), 3)


class TestUserProfileManager(ManagerTestCase):
    async def test_defaults(self):
        profile = await self.profiles.create({"email": "farmer@example.com"})
        self.assertEqual(profile.preferred_language, "en")
        self.assertTrue(profile.notification_enabled)
        self.assertIsNotNone(profile.created_at)

    async def test_email_is_unique(self):
        await self.profiles.create({"email": "farmer@example.com"})
        with self.assertRaises(PersistenceError):
            await self.profiles.create({"email": "farmer@example.com", "name": "Duplicate"})


if __name__ == "__main__":
    unittest.main()
