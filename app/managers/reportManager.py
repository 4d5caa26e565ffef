import logging

import sqlalchemy as db
from sqlalchemy.exc import SQLAlchemyError

from app.exceptions import ErrorCode, PersistenceError
from app.managers.base import BaseSchema, GenericManager

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 10


class DiseaseReportSchema(BaseSchema):
    __tablename__ = "disease_reports"
    __immutable__ = True

    image_path = db.Column(db.Text, nullable=False)
    disease_prediction = db.Column(db.String(255), nullable=False, index=True)
    confidence = db.Column(db.Float, nullable=False)
    severity = db.Column(db.String(20), nullable=True)
    category = db.Column(db.String(100), nullable=True)
    user_email = db.Column(db.String(255), nullable=True, index=True)
    location = db.Column(db.String(255), nullable=True)
    timestamp = db.Column(db.DateTime, server_default=db.func.current_timestamp(), nullable=False)

    __table_args__ = (
        db.CheckConstraint("confidence >= 0 AND confidence <= 100", name="ck_disease_reports_confidence"),
    )


class ReportManager(GenericManager[DiseaseReportSchema]):
    """Append-only store of detection events."""

    async def insert(self, report: dict) -> int:
        record = await self.create(report)
        return record.id

    async def query_by_email(self, email: str) -> list[DiseaseReportSchema]:
        return await self.fetch_all(
            limit=HISTORY_LIMIT,
            filters={"user_email": email},
            sorts=["-timestamp", "-id"],
        )

    async def aggregate_by_disease(self) -> list[dict]:
        """
        One entry per distinct prediction, most frequent first.
        `severity` is reported from an arbitrary row of the group; every row
        of one disease carries the same severity.
        """
        Schema = self.Schema
        count = db.func.count(Schema.id).label("count")
        query = (
            db.select(
                Schema.disease_prediction,
                count,
                db.func.avg(Schema.confidence).label("avg_confidence"),
                db.func.max(Schema.severity).label("severity"),
            )
            .group_by(Schema.disease_prediction)
            .order_by(count.desc(), Schema.disease_prediction)
        )
        try:
            async with self.session_factory() as session:
                rows = (await session.execute(query)).all()
        except SQLAlchemyError as e:
            logger.error(f"Aggregation on {self.tablename} failed: {e}", exc_info=True)
            raise PersistenceError(ErrorCode.DB_READ_FAILED, self.tablename) from e
        return [
            {
                "disease_prediction": row.disease_prediction,
                "count": row.count,
                "avg_confidence": float(row.avg_confidence) if row.avg_confidence is not None else None,
                "severity": row.severity,
            }
            for row in rows
        ]


__all__ = [
    "DiseaseReportSchema", "ReportManager", "HISTORY_LIMIT",
]
