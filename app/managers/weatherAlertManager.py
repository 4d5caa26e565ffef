import sqlalchemy as db

from app.managers.base import BaseSchema, GenericManager


class WeatherAlertSchema(BaseSchema):
    __tablename__ = "weather_alerts"

    location = db.Column(db.String(255), nullable=False, index=True)
    temperature = db.Column(db.Float, nullable=False)
    humidity = db.Column(db.Float, nullable=False)
    risk_level = db.Column(db.String(20), nullable=False)
    alert_message = db.Column(db.Text, nullable=False)
    timestamp = db.Column(db.DateTime, server_default=db.func.current_timestamp(), nullable=False)


class WeatherAlertManager(GenericManager[WeatherAlertSchema]):
    async def fetch_recent(self, limit: int = 10) -> list[WeatherAlertSchema]:
        return await self.fetch_all(limit=limit, sorts=["-timestamp", "-id"])


__all__ = [
    "WeatherAlertSchema", "WeatherAlertManager",
]
