"""
Shared API dependencies.

Reusable FastAPI dependencies providing the service layer.
"""

from app.core.config import settings
from app.services.analytics_service import AnalyticsService
from app.services.biomotor_service import BiomotorService
from app.services.readiness_service import ReadinessService


def get_analytics_service() -> AnalyticsService:
    return AnalyticsService(settings)


def get_readiness_service() -> ReadinessService:
    return ReadinessService(settings)


def get_biomotor_service() -> BiomotorService:
    return BiomotorService()
