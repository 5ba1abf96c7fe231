"""Pydantic schemas for request/response validation."""

from app.schemas.training_session import DailyLoad, TrainingSession
from app.schemas.training_state import (
    ACWRZone,
    AthleteLoadResult,
    BatchTrainingLoadRequest,
    BatchTrainingLoadResponse,
    FormZone,
    TrainingLoadRequest,
    TrainingLoadResponse,
    TrainingLoadSummary,
    TrainingState,
)
from app.schemas.readiness import (
    MetricLevel,
    MetricStats,
    ReadinessEstimate,
    ReadinessEstimateRequest,
    ReadinessRecord,
    ReadinessSummary,
    ReadinessSummaryRequest,
)
from app.schemas.biomotor import (
    AgeBracket,
    BiomotorEvaluateRequest,
    BiomotorTest,
    BiomotorTestResult,
    NormRange,
    NormTable,
    NormTier,
    Sex,
    TestCategory,
    TierEvaluation,
)

__all__ = [
    "DailyLoad",
    "TrainingSession",
    "ACWRZone",
    "AthleteLoadResult",
    "BatchTrainingLoadRequest",
    "BatchTrainingLoadResponse",
    "FormZone",
    "TrainingLoadRequest",
    "TrainingLoadResponse",
    "TrainingLoadSummary",
    "TrainingState",
    "MetricLevel",
    "MetricStats",
    "ReadinessEstimate",
    "ReadinessEstimateRequest",
    "ReadinessRecord",
    "ReadinessSummary",
    "ReadinessSummaryRequest",
    "AgeBracket",
    "BiomotorEvaluateRequest",
    "BiomotorTest",
    "BiomotorTestResult",
    "NormRange",
    "NormTable",
    "NormTier",
    "Sex",
    "TestCategory",
    "TierEvaluation",
]
