# Custom exceptions package
from app.exceptions.base import (
    BaseErrorCode,
    ErrorCode,
    CropGuardError,
    ClientInputError,
    UpstreamUnavailable,
    PersistenceError,
    InternalError,
)

__all__ = [
    'BaseErrorCode',
    'ErrorCode',
    'CropGuardError',
    'ClientInputError',
    'UpstreamUnavailable',
    'PersistenceError',
    'InternalError',
]
