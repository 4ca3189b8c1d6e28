"""
Health Service Module
Handles health checks for the database and the loaded books
"""

from datetime import datetime
from typing import Any, Dict

from ..utils.constants import HealthStatus
from ..utils.logger import logger
from .book_service import book_service


class HealthService:
    """Service for health monitoring"""

    async def check_all(self) -> Dict[str, Any]:
        """Check health of all components"""
        database_health = await self.check_database()
        books_health = self.check_books()

        healthy = all(
            c['status'] == HealthStatus.HEALTHY for c in (database_health, books_health)
        )

        return {
            'status': HealthStatus.HEALTHY if healthy else HealthStatus.UNHEALTHY,
            'timestamp': datetime.now().isoformat(),
            'components': {
                'database': database_health,
                'books': books_health
            }
        }

    async def check_database(self) -> Dict[str, Any]:
        """Check the books can be read back from the database"""
        database = book_service.database
        try:
            await database.load_book()
            return {
                'status': HealthStatus.HEALTHY,
                'path': database.db_path,
                'size_bytes': database.get_database_size(),
                'message': 'Connected'
            }
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return {
                'status': HealthStatus.UNHEALTHY,
                'path': database.db_path,
                'size_bytes': 0,
                'message': str(e)
            }

    def check_books(self) -> Dict[str, Any]:
        return {
            'status': HealthStatus.HEALTHY,
            'ledgers': len(book_service.registry),
            'vouchers': len(book_service.journal),
            'message': 'Loaded'
        }


# Global service instance
health_service = HealthService()
