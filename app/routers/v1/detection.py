from fastapi import APIRouter, UploadFile, File, Form, Depends
from typing import Optional

from app.dependencies import get_pipeline, get_report_manager
from app.managers.reportManager import ReportManager
from app.schemas.detection import DetectionResponse, DiseaseReportOut, DiseaseStat
from app.services.ingestion import IngestionPipeline


router = APIRouter()


@router.post("/detect-disease", response_model=DetectionResponse)
async def detect_disease(
    image: Optional[UploadFile] = File(None, description="Leaf photo, image/*, at most 5MB"),
    email: Optional[str] = Form(None),
    location: Optional[str] = Form(None),
    pipeline: IngestionPipeline = Depends(get_pipeline),
):
    """
    Workflow:
    1. Validate + store the upload.
    2. Classify (mock, weighted random).
    3. Look up treatment advice.
    4. Record the detection (status=partial_success if the row could not be written).
    5. Return the composite result.
    """
    return await pipeline.run(image, email=email, location=location)


@router.get("/disease-history/{email}", response_model=list[DiseaseReportOut])
async def disease_history(email: str, reports: ReportManager = Depends(get_report_manager)):
    """Ten most recent detections submitted with this email."""
    return await reports.query_by_email(email)


@router.get("/analytics/disease-stats", response_model=list[DiseaseStat])
async def disease_stats(reports: ReportManager = Depends(get_report_manager)):
    return await reports.aggregate_by_disease()
