from fastapi import APIRouter

from app.schemas.advisory import TranslateRequest, TranslateResponse
from app.services.translation_service import translation_service

router = APIRouter(tags=["Translation"])


@router.post("/translate", response_model=TranslateResponse)
async def translate(request: TranslateRequest):
    """
    Stub translation of short advisory texts. Only the app's own alert
    messages are translated; other text comes back unchanged.
    """
    return translation_service.translate(request.text, request.targetLang)
