"""
Biomotor test service.

Catalog lookups and norm-referenced evaluation of test results.
"""

from typing import Optional

from fastapi import HTTPException, status

from app.biomotor import catalog
from app.biomotor.catalog import DEFAULT_NORM_TABLE
from app.engine.errors import InvalidInputError, UnknownTestError
from app.engine.norms import evaluate_test_result
from app.schemas.biomotor import BiomotorEvaluateRequest, BiomotorTest, NormTable, TestCategory, TierEvaluation


class BiomotorService:
    """Service for the biomotor test catalog and norms."""

    def __init__(self, table: NormTable = DEFAULT_NORM_TABLE):
        self.table = table

    def list_tests(self, category: Optional[TestCategory] = None) -> list[BiomotorTest]:
        return catalog.list_tests(category)

    def evaluate(self, request: BiomotorEvaluateRequest) -> TierEvaluation:
        try:
            return evaluate_test_result(request.result, request.sex, request.birth_date, as_of=request.as_of,
                                        table=self.table, )
        except UnknownTestError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
        except InvalidInputError as e:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
