from fastapi import APIRouter
from datetime import datetime, timezone

from app.schemas.advisory import CropPlannerResponse, KnowledgeBaseResponse, MarketPriceResponse
from app.services.knowledge import knowledge_service

router = APIRouter()


@router.get("/crop-planner/{crop}", response_model=CropPlannerResponse)
async def crop_planner(crop: str):
    """Planting calendar for a crop. Unknown crops get the rice planner."""
    return CropPlannerResponse(crop=crop, planner=knowledge_service.get_planner(crop))


@router.get("/market-prices/{crop}", response_model=MarketPriceResponse)
async def market_prices(crop: str):
    return MarketPriceResponse(
        crop=crop,
        prices=knowledge_service.get_market_prices(crop),
        timestamp=datetime.now(timezone.utc),
    )


@router.get("/knowledge-base", response_model=KnowledgeBaseResponse)
async def knowledge_base():
    return KnowledgeBaseResponse(knowledge=knowledge_service.get_knowledge_base())
