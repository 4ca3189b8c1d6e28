"""
Errors Module
Exceptions raised by the books and translated to JSON errors by the API
"""

from .constants import ErrorCode


class BookError(Exception):
    """Base error carrying an API error code"""
    code = ErrorCode.UNKNOWN_ERROR
    status_code = 500

    def __init__(self, message: str, details: str = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(BookError):
    """Rejected ledger or voucher input; the stores are left unchanged"""
    code = ErrorCode.VALIDATION_ERROR
    status_code = 422


class ExportFailure(BookError):
    """Interchange document could not be serialized"""
    code = ErrorCode.EXPORT_FAILED
    status_code = 500


class StorageError(BookError):
    """Book could not be loaded from or saved to the database"""
    code = ErrorCode.STORAGE_ERROR
    status_code = 503
