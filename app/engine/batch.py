"""
Per-athlete fan-out of the training load computation.

Each athlete's series is independent, so a batch (team dashboard,
athlete comparison, report export) is computed on a thread pool.  A
failing athlete is reported in its own :class:`AthleteLoadResult` and
never aborts the rest of the batch.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Optional, Union

from loguru import logger
from pydantic import ValidationError

from app.engine.errors import InvalidInputError, TrainingLoadError
from app.engine.metrics import TrainingLoadConfig, compute_training_load, summarize_training_load
from app.schemas.training_session import TrainingSession
from app.schemas.training_state import AthleteLoadResult

SessionRow = Union[TrainingSession, Mapping[str, Any]]

DEFAULT_MAX_WORKERS = 4


def _to_session(row: SessionRow) -> TrainingSession:
    if isinstance(row, TrainingSession):
        return row
    return TrainingSession.model_validate(row)


def compute_athlete(athlete_id: str, rows: Iterable[SessionRow],
                    config: Optional[TrainingLoadConfig] = None, ) -> AthleteLoadResult:
    """Compute one athlete's series, capturing any input error in the result."""
    try:
        if rows is None or isinstance(rows, (str, bytes, Mapping)) or not isinstance(rows, Iterable):
            raise InvalidInputError(f"Sessions for athlete {athlete_id} must be a list of sessions, "
                                    f"got {type(rows).__name__}")
        sessions = [_to_session(row) for row in rows]
        states = compute_training_load(sessions, config=config)
    except (TrainingLoadError, ValidationError) as e:
        logger.warning(f"Training load failed for athlete {athlete_id}: {type(e).__name__}: {e}")
        return AthleteLoadResult(athlete_id=athlete_id, error=str(e), error_type=type(e).__name__)

    return AthleteLoadResult(athlete_id=athlete_id, series=states, summary=summarize_training_load(states))


def compute_many(sessions_by_athlete: Mapping[str, Iterable[SessionRow]],
                 config: Optional[TrainingLoadConfig] = None,
                 max_workers: Optional[int] = None, ) -> dict[str, AthleteLoadResult]:
    """Compute the training load of several athletes concurrently.

    Args:
        sessions_by_athlete: ``athlete_id -> sessions``.  Sessions may be
            :class:`TrainingSession` objects or raw mappings, which are
            validated here.
        config: Shared :class:`TrainingLoadConfig` (default config if
            ``None``).
        max_workers: Thread pool size.

    Returns:
        ``athlete_id -> AthleteLoadResult``, in input order.
    """
    if not sessions_by_athlete:
        return {}

    workers = max(1, min(max_workers or DEFAULT_MAX_WORKERS, len(sessions_by_athlete)))
    logger.info(f"Computing training load for {len(sessions_by_athlete)} athletes with {workers} workers")

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {
            athlete_id: executor.submit(compute_athlete, athlete_id, rows, config)
            for athlete_id, rows in sessions_by_athlete.items()
        }
        results = {athlete_id: future.result() for athlete_id, future in futures.items()}

    failed = sum(1 for r in results.values() if not r.ok)
    if failed:
        logger.warning(f"{failed} of {len(results)} athletes failed in batch")
    return results
