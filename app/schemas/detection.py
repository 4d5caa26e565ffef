from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Literal
from datetime import datetime

Severity = Literal["none", "low", "moderate", "high"]


# --- Static reference records ---

class DiseaseEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    base_confidence: float = Field(..., ge=0, le=1)
    severity: Severity
    weight: int = Field(1, gt=0)


class TreatmentEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    organic: str
    prevention: str
    severity: str
    urgency: str


# --- Pipeline output ---

class Classification(BaseModel):
    model_config = ConfigDict(frozen=True)

    disease: str
    confidence: int
    severity: Severity

    @property
    def category(self) -> str:
        return self.disease.split(" ")[0]


class DetectionResponse(BaseModel):
    success: bool = True
    disease: str
    confidence: int
    severity: Severity
    treatment: TreatmentEntry
    imagePath: str
    category: str

    # whether the detection row was committed; False means partial success
    reportId: Optional[int] = None
    recorded: bool = True
    status: Literal["complete", "partial_success"] = "complete"


# --- Report store views ---

class DiseaseReportOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    image_path: str
    disease_prediction: str
    confidence: float
    severity: Optional[str] = None
    category: Optional[str] = None
    user_email: Optional[str] = None
    location: Optional[str] = None
    timestamp: datetime


class DiseaseStat(BaseModel):
    disease_prediction: str
    count: int
    avg_confidence: Optional[float] = None
    severity: Optional[str] = None
