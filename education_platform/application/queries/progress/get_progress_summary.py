"""
Get Progress Summary Query.

The fraud threshold defaults to Config.FRAUD_MIN_COMPLETION_RATIO and can
be overridden per handler.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from education_platform.application.common.interfaces import Query, QueryHandler
from education_platform.application.dto.progress import ProgressSummaryDTO
from education_platform.config.settings import Config
from education_platform.domain.exceptions import EntityNotFoundError
from education_platform.domain.ports.repositories import CourseProgressRepository
from education_platform.domain.value_objects.identifier import Identifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GetProgressSummaryQuery(Query[ProgressSummaryDTO]):
    progress_id: Identifier


class GetProgressSummaryHandler(QueryHandler[ProgressSummaryDTO]):
    def __init__(
        self,
        progress_repository: CourseProgressRepository,
        min_completion_ratio: Optional[float] = None,
    ):
        self._progress_repository = progress_repository
        self._min_completion_ratio = (
            Config.FRAUD_MIN_COMPLETION_RATIO
            if min_completion_ratio is None
            else min_completion_ratio
        )

    async def execute(self, query: GetProgressSummaryQuery) -> ProgressSummaryDTO:
        progress = await self._progress_repository.get_by_id(query.progress_id)
        if not progress:
            raise EntityNotFoundError("CourseProgress", query.progress_id)

        score = progress.fraud_risk_score(self._min_completion_ratio)
        if score > 0:
            logger.warning(f"[PROGRESS] Fraud risk {score}% for progress {progress.id}")
        return ProgressSummaryDTO.from_entity(progress, score)
