"""High level entry points for matching resumes against jobs."""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from .jobs import JobRecord
from .scoring import ScoringStrategy, Strategy, VectorSpaceScorer, get_strategy

logger = logging.getLogger(__name__)

JobLike = Union[JobRecord, Mapping[str, Any]]


class MatchService:
    """Score resumes against job records with a single configured strategy."""

    def __init__(self, strategy: Union[Strategy, str, ScoringStrategy] = Strategy.VECTOR_SPACE) -> None:
        if isinstance(strategy, (Strategy, str)):
            strategy = get_strategy(strategy)
        self.scorer = strategy
        self._text_scorer = VectorSpaceScorer()

    @property
    def strategy(self) -> Strategy:
        return self.scorer.strategy

    def match_percentage(self, resume_text: Optional[str], job: Optional[JobLike]) -> int:
        """Return how well ``resume_text`` matches ``job`` as a percentage."""
        if not resume_text or job is None:
            return 0
        if not isinstance(job, JobRecord):
            job = JobRecord.from_mapping(job)
        score = self.scorer.score(resume_text, job)
        logger.debug("Scored %r with %s: %d", job.title, self.strategy.value, score)
        return score

    def semantic_similarity(self, text_a: Optional[str], text_b: Optional[str]) -> int:
        """Vector-space similarity of two raw texts, regardless of the configured strategy."""
        return self._text_scorer.compare(text_a, text_b)

    def match_from_texts(self, resume_text: Optional[str], job_description: Optional[str]) -> int:
        """Compare a resume with a pasted job description."""
        if not resume_text or not job_description:
            return 0
        return self.semantic_similarity(resume_text, job_description)


_default_service = MatchService()


def match_percentage(resume_text: Optional[str], job: Optional[JobLike]) -> int:
    return _default_service.match_percentage(resume_text, job)


def semantic_similarity(text_a: Optional[str], text_b: Optional[str]) -> int:
    return _default_service.semantic_similarity(text_a, text_b)
