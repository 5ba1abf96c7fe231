"""Business logic services."""

from app.services.analytics_service import AnalyticsService
from app.services.biomotor_service import BiomotorService
from app.services.readiness_service import ReadinessService

__all__ = [
    "AnalyticsService",
    "BiomotorService",
    "ReadinessService",
]
