"""
JSON View
Formats responses as JSON
"""

from typing import Any, Dict, List, Optional
from datetime import datetime

from ..utils.errors import BookError


class JsonView:
    """JSON response formatter"""

    @staticmethod
    def success(message: str = "", data: Any = None) -> Dict:
        """Format success response"""
        return {
            "status": "success",
            "message": message,
            "data": data,
            "timestamp": datetime.now().isoformat()
        }

    @staticmethod
    def error(code: str, message: str, details: Optional[str] = None) -> Dict:
        """Format error response"""
        return {
            "error": True,
            "code": code,
            "message": message,
            "details": details,
            "timestamp": datetime.now().isoformat()
        }

    @staticmethod
    def book_error(exc: BookError) -> Dict:
        return JsonView.error(exc.code, exc.message, exc.details)

    @staticmethod
    def listing(data: List, **extra) -> Dict:
        """Format a list response with its count"""
        return {
            "count": len(data),
            "data": data,
            **extra
        }
