"""
Heuristic outbreak predictions from current weather.

Scores start from a base value and are nudged up by coarse weather
thresholds, then capped:

    diseaseRisk             0.5  +0.2 hot, +0.3 humid, +0.1 growing season   (max 1.0)
    spreadProbability       0.3  +0.3 humidity > 80, +0.2 temperature > 25   (max 0.9)
    treatmentEffectiveness  0.7  +0.2 humidity < 60, +0.1 temperature < 30   (max 0.95)
"""
import random
from datetime import datetime
from typing import Optional

from app.schemas.advisory import PredictionRequest, Predictions, TimelineStep

# June through September
GROWING_MONTHS = range(6, 10)

TIMELINE = (
    TimelineStep(day=1, action='Apply initial treatment', priority='high'),
    TimelineStep(day=3, action='Monitor for improvement', priority='medium'),
    TimelineStep(day=7, action='Reapply treatment if needed', priority='high'),
    TimelineStep(day=14, action='Assess treatment effectiveness', priority='medium'),
    TimelineStep(day=21, action='Plan long-term prevention', priority='low'),
)


def risk_factors(temperature: float, humidity: float, now: datetime) -> dict:
    return {
        "temperature": "high" if temperature > 25 else "low" if temperature < 10 else "moderate",
        "humidity": "high" if humidity > 80 else "low" if humidity < 50 else "moderate",
        "season": "growing" if now.month in GROWING_MONTHS else "dormant",
    }


def disease_risk(factors: dict) -> float:
    risk = 0.5
    if factors["temperature"] == "high": risk += 0.2
    if factors["humidity"] == "high": risk += 0.3
    if factors["season"] == "growing": risk += 0.1
    return round(min(risk, 1.0), 2)


def spread_probability(temperature: float, humidity: float) -> float:
    probability = 0.3
    if humidity > 80: probability += 0.3
    if temperature > 25: probability += 0.2
    return round(min(probability, 0.9), 2)


def treatment_effectiveness(temperature: float, humidity: float) -> float:
    effectiveness = 0.7
    if humidity < 60: effectiveness += 0.2
    if temperature < 30: effectiveness += 0.1
    return round(min(effectiveness, 0.95), 2)


def recommendations(factors: dict) -> list[str]:
    advice = []
    if factors["humidity"] == "high":
        advice.append('Improve air circulation around plants')
        advice.append('Consider using fans in greenhouse')
    if factors["temperature"] == "high":
        advice.append('Provide shade during hottest hours')
        advice.append('Increase watering frequency')
    advice.append('Apply preventive fungicide treatment')
    advice.append('Monitor plants daily for early symptoms')
    return advice


class PredictionService:
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def predict(self, request: PredictionRequest, now: Optional[datetime] = None) -> Predictions:
        now = now or datetime.now()
        temperature = request.weather.temperature
        humidity = request.weather.humidity
        factors = risk_factors(temperature, humidity, now)

        return Predictions(
            diseaseRisk=disease_risk(factors),
            spreadProbability=spread_probability(temperature, humidity),
            treatmentEffectiveness=treatment_effectiveness(temperature, humidity),
            recommendations=recommendations(factors),
            timeline=list(TIMELINE),
            confidence=self.rng.uniform(0.7, 1.0),
        )


prediction_service = PredictionService()
