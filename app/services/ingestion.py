"""
Disease-report ingestion.

    RECEIVED -> CLASSIFIED -> TREATED -> PERSISTED -> RESPONDED
        \___________\___________\___________\______-> FAILED

RECEIVED validates and stores the upload. Classification and treatment
lookup cannot fail. A store failure at PERSISTED does not abort the request:
the response reports `recorded=False` with status `partial_success` so the
caller knows the detection was not saved, and the run goes from TREATED
straight to RESPONDED. Every transition is logged at DEBUG level.
"""
import logging
from enum import Enum
from typing import Optional

from fastapi import UploadFile

from app.exceptions import PersistenceError
from app.managers.reportManager import ReportManager
from app.schemas.detection import DetectionResponse
from app.services.classifier import DiseaseClassifier
from app.services.image import ImageService
from app.services.storage import UploadStorage
from app.services.treatment import TreatmentService

logger = logging.getLogger(__name__)


class IngestionState(str, Enum):
    RECEIVED = "received"
    CLASSIFIED = "classified"
    TREATED = "treated"
    PERSISTED = "persisted"
    RESPONDED = "responded"
    FAILED = "failed"


class IngestionPipeline:
    def __init__(
            self,
            classifier: DiseaseClassifier,
            treatments: TreatmentService,
            reports: ReportManager,
            storage: UploadStorage,
            images: ImageService,
    ):
        self.classifier = classifier
        self.treatments = treatments
        self.reports = reports
        self.storage = storage
        self.images = images

    def _advance(self, state: IngestionState, image_path: Optional[str] = None) -> IngestionState:
        logger.debug(f"ingestion -> {state.value} ({image_path or 'no file'})")
        return state

    async def run(
            self,
            file: Optional[UploadFile],
            email: Optional[str] = None,
            location: Optional[str] = None,
    ) -> DetectionResponse:
        image_path = None
        state = self._advance(IngestionState.RECEIVED)
        try:
            image_bytes = await self.storage.read_image(file)
            self.images.inspect(image_bytes)
            image_path = self.storage.save(image_bytes, file.filename)

            result = self.classifier.classify(image_bytes)
            state = self._advance(IngestionState.CLASSIFIED, image_path)
            logger.info(f"🔬 Detected {result.disease} ({result.confidence}%, severity={result.severity})")

            treatment = self.treatments.lookup(result.disease)
            state = self._advance(IngestionState.TREATED, image_path)

            report_id = None
            recorded = True
            try:
                report_id = await self.reports.insert({
                    "image_path": image_path,
                    "disease_prediction": result.disease,
                    "confidence": result.confidence,
                    "severity": result.severity,
                    "category": result.category,
                    "user_email": email or None,
                    "location": location or None,
                })
                state = self._advance(IngestionState.PERSISTED, image_path)
            except PersistenceError as e:
                # partial success goes straight from TREATED to RESPONDED
                logger.error(f"❌ Detection for {image_path} not recorded: {e}")
                recorded = False

            response = DetectionResponse(
                disease=result.disease,
                confidence=result.confidence,
                severity=result.severity,
                treatment=treatment,
                imagePath=image_path,
                category=result.category,
                reportId=report_id,
                recorded=recorded,
                status="complete" if recorded else "partial_success",
            )
            self._advance(IngestionState.RESPONDED, image_path)
            return response
        except Exception as e:
            self._advance(IngestionState.FAILED, image_path)
            logger.warning(f"Ingestion failed after {state.value}: {e}")
            raise
