import asyncio
import logging

from app.config import init_settings
from app.exceptions import ClientInputError, ErrorCode
from app.schemas.advisory import NotificationRequest

logger = logging.getLogger(__name__)
settings = init_settings()


class NotificationService:
    """
    Stand-in for e-mail alerts: nothing leaves the process, the message is
    logged after a short artificial delay.
    """

    def __init__(self, delay_seconds: float = settings.NOTIFICATION_DELAY_SECONDS):
        self.delay_seconds = delay_seconds

    async def send(self, request: NotificationRequest) -> str:
        if not (request.email and request.subject and request.message):
            raise ClientInputError(ErrorCode.MISSING_NOTIFICATION_FIELDS)

        logger.info(f"📧 Email notification to {request.email}: {request.subject}")
        logger.info(f"Message: {request.message}")
        await asyncio.sleep(self.delay_seconds)
        return "Notification sent successfully"


notification_service = NotificationService()
