from fastapi import APIRouter
import logging

from app.schemas.economics import EconomicImpactRequest, EconomicImpactResponse
from app.services import economics

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/economic-impact", response_model=EconomicImpactResponse)
async def economic_impact(payload: EconomicImpactRequest):
    result = economics.compute(payload.disease, payload.cropType, payload.farmSize, payload.currentYield)
    logger.info(f"💰 {payload.cropType}/{payload.disease}: net loss {result.netLoss}")
    return EconomicImpactResponse(**result.model_dump())
