from pydantic import BaseModel, ConfigDict
from typing import Optional


class EconomicImpactRequest(BaseModel):
    # NaN / Infinity are valid JSON floats for the parser but not for the calculator
    model_config = ConfigDict(allow_inf_nan=False)

    disease: str
    cropType: str
    farmSize: float
    currentYield: float


class EconomicImpactResult(BaseModel):
    cropType: str
    disease: str
    severity: str
    farmSize: float
    currentYield: float
    potentialYield: float
    yieldLossPct: int
    yieldLossAmount: float
    basePrice: float
    revenueLoss: float
    treatmentCost: float
    netLoss: float
    # None when there is no treatment cost to return on
    roi: Optional[float] = None


class EconomicImpactResponse(EconomicImpactResult):
    success: bool = True
