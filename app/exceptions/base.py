from enum import Enum


class BaseErrorCode(Enum):
    def __init__(self, code: int, message: str):
        self._value_ = code
        self.message = message

    @property
    def code(self):
        return self.value

    def as_dict(self, **kwargs):
        return {
            "code": self.code,
            "message": self.message.format(**kwargs),
            "name": self.name,
        }


class ErrorCode(BaseErrorCode):
    # client input
    NO_IMAGE = (4000, "No image file provided")
    NOT_AN_IMAGE = (4001, "Only image files are allowed!")
    IMAGE_TOO_LARGE = (4002, "File too large. Maximum size is {limit_mb}MB.")
    UNREADABLE_IMAGE = (4003, "Uploaded file is not a readable image")
    INVALID_PAYLOAD = (4004, "{detail}")
    MISSING_NOTIFICATION_FIELDS = (4005, "Email, subject, and message are required")
    UNSUPPORTED_LANGUAGE = (4006, "Unsupported target language: {language}")

    # upstream
    WEATHER_UNAVAILABLE = (5020, "Weather service unavailable for {location}")

    # persistence
    DB_WRITE_FAILED = (5030, "Failed to write {__tablename__} record")
    DB_READ_FAILED = (5031, "Failed to read {__tablename__} records")

    # catch-all
    INTERNAL = (5000, "Internal server error")


class CropGuardError(Exception):
    """Base exception for every error the service raises on purpose"""
    status_code: int = 500

    def __init__(self, error_enum: BaseErrorCode, **err_kwargs):
        self.error_enum = error_enum
        self.message = error_enum.message.format(**err_kwargs)
        super().__init__(self.message)

    def as_dict(self) -> dict:
        return {"error": self.message}


class ClientInputError(CropGuardError):
    """Missing or invalid request input; shown to the caller as 400"""
    status_code = 400


class UpstreamUnavailable(CropGuardError):
    """An outbound dependency failed; callers recover with fallback data"""
    status_code = 502


class PersistenceError(CropGuardError):
    """The store could not commit or read rows"""
    status_code = 500

    def __init__(self, error_enum: BaseErrorCode, tablename: str):
        self.tablename = tablename
        super().__init__(error_enum, __tablename__=tablename)


class InternalError(CropGuardError):
    """Unexpected failure; the message never carries details"""
    status_code = 500

    def __init__(self, error_enum: BaseErrorCode = ErrorCode.INTERNAL, **err_kwargs):
        super().__init__(error_enum, **err_kwargs)


__all__ = [
    "BaseErrorCode",
    "ErrorCode",
    "CropGuardError",
    "ClientInputError",
    "UpstreamUnavailable",
    "PersistenceError",
    "InternalError",
]
