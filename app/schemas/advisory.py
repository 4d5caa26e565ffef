from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any, Literal
from datetime import datetime

RiskLevel = Literal["low", "medium", "high"]


# --- Weather ---

class WeatherReading(BaseModel):
    temperature: float
    humidity: float


class WeatherReport(BaseModel):
    location: str
    temperature: float
    humidity: float
    riskLevel: RiskLevel
    alertMessage: str
    timestamp: datetime
    source: Literal["live", "fallback"]


class WeatherAlertOut(BaseModel):
    id: int
    location: str
    temperature: float
    humidity: float
    risk_level: str
    alert_message: str
    timestamp: datetime

    class Config:
        from_attributes = True


# --- AI predictions ---

class PredictionRequest(BaseModel):
    disease: Optional[str] = None
    weather: WeatherReading
    location: Optional[str] = None
    cropType: Optional[str] = None


class TimelineStep(BaseModel):
    day: int
    action: str
    priority: Literal["low", "medium", "high"]


class Predictions(BaseModel):
    diseaseRisk: float
    spreadProbability: float
    treatmentEffectiveness: float
    recommendations: List[str]
    timeline: List[TimelineStep]
    confidence: float


class PredictionResponse(BaseModel):
    success: bool = True
    predictions: Predictions


# --- Reference lookups ---

class MarketPrices(BaseModel):
    current: float
    weekly: float
    monthly: float
    trend: Literal["rising", "falling", "stable"]


class MarketPriceResponse(BaseModel):
    success: bool = True
    crop: str
    prices: MarketPrices
    timestamp: datetime


class CropPlannerResponse(BaseModel):
    success: bool = True
    crop: str
    planner: Dict[str, Any]


class KnowledgeBaseResponse(BaseModel):
    success: bool = True
    knowledge: Dict[str, Any]


# --- Notification & translation stubs ---

class NotificationRequest(BaseModel):
    email: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None


class NotificationResponse(BaseModel):
    success: bool = True
    message: str


class TranslateRequest(BaseModel):
    text: str
    targetLang: str = Field(..., description="ISO 639-1 code, e.g. es or hi")


class TranslateResponse(BaseModel):
    success: bool = True
    translatedText: str
    targetLang: str
    translated: bool


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
