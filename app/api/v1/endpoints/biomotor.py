"""
Biomotor endpoints — test catalog and norm-referenced evaluation.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_biomotor_service
from app.schemas.biomotor import BiomotorEvaluateRequest, BiomotorTest, TestCategory, TierEvaluation
from app.services.biomotor_service import BiomotorService

router = APIRouter()


@router.get(
    "/tests",
    summary="List catalogued biomotor tests.",
    response_model=list[BiomotorTest],
)
def list_tests(
    category: Optional[TestCategory] = Query(None, description="Restrict to one category"),
    service: BiomotorService = Depends(get_biomotor_service),
):
    return service.list_tests(category)


@router.post(
    "/evaluate",
    summary="Evaluate a test result against the norm table.",
    response_model=TierEvaluation,
)
def evaluate(
    request: BiomotorEvaluateRequest,
    service: BiomotorService = Depends(get_biomotor_service),
):
    return service.evaluate(request)
