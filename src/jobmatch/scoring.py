"""Score how well a resume matches a job posting."""
from __future__ import annotations

import logging
import math
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Mapping, Optional, Protocol, Sequence

import numpy as np

from .jobs import JobRecord
from .text import STOP_WORDS, count_terms, normalize, tokenize

logger = logging.getLogger(__name__)


class Strategy(str, Enum):
    """Available scoring strategies."""

    VECTOR_SPACE = "vector-space"
    KEYWORD_OVERLAP = "keyword-overlap"


class ScoringStrategy(Protocol):
    """Protocol for resume-to-job scorers."""

    strategy: Strategy

    def score(self, resume_text: Optional[str], job: JobRecord) -> int:
        """Return a match percentage in ``[0, 100]``."""


def to_percentage(ratio: float) -> int:
    """Convert a ratio to an integer percentage, rounding halves up."""
    return max(0, min(100, math.floor(ratio * 100 + 0.5)))


class VectorSpaceScorer:
    """Cosine similarity over term-frequency vectors.

    Each term's frequency is doubled when the term appears in only one of the
    two documents being compared. Terms shared by both documents keep their raw
    frequency. This is a pairwise emphasis, not a corpus inverse document
    frequency, and it keeps the similarity symmetric.
    """

    strategy = Strategy.VECTOR_SPACE

    SHARED_WEIGHT = 1.0
    EXCLUSIVE_WEIGHT = 2.0

    def __init__(self, stop_words: frozenset = STOP_WORDS) -> None:
        self.stop_words = stop_words

    def frequencies(self, text: Optional[str]) -> Counter:
        return count_terms(tokenize(normalize(text), self.stop_words))

    def weight_vector(
        self,
        counts: Mapping[str, int],
        other_counts: Mapping[str, int],
        vocabulary: Sequence[str],
    ) -> np.ndarray:
        weights = [
            counts.get(term, 0)
            * (self.SHARED_WEIGHT if term in other_counts else self.EXCLUSIVE_WEIGHT)
            for term in vocabulary
        ]
        return np.asarray(weights, dtype=np.float64)

    def similarity(self, counts_a: Mapping[str, int], counts_b: Mapping[str, int]) -> float:
        """Cosine similarity in ``[0, 1]`` of two frequency maps."""
        vocabulary = sorted(set(counts_a) | set(counts_b))
        if not vocabulary:
            return 0.0
        vector_a = self.weight_vector(counts_a, counts_b, vocabulary)
        vector_b = self.weight_vector(counts_b, counts_a, vocabulary)
        norm_a = float(np.linalg.norm(vector_a))
        norm_b = float(np.linalg.norm(vector_b))
        if norm_a == 0 or norm_b == 0:
            return 0.0
        return float(np.dot(vector_a, vector_b)) / (norm_a * norm_b)

    def compare(self, text_a: Optional[str], text_b: Optional[str]) -> int:
        """Percentage similarity between two raw texts."""
        if not text_a or not text_b:
            return 0
        return to_percentage(self.similarity(self.frequencies(text_a), self.frequencies(text_b)))

    def score(self, resume_text: Optional[str], job: JobRecord) -> int:
        return self.compare(resume_text, job.composite_text())


@dataclass(frozen=True)
class Keyword:
    term: str
    is_skill: bool = False


class KeywordOverlapScorer:
    """Share of job keywords found verbatim in the resume.

    Keywords are matched as substrings of the lowercased resume, so ``java``
    also matches inside ``javascript``. A matched skill keyword counts 1.5,
    any other matched keyword counts 1; the denominator is the number of
    distinct keywords.
    """

    strategy = Strategy.KEYWORD_OVERLAP

    MATCH_WEIGHT = 1.0
    SKILL_BONUS = 0.5

    def __init__(self, stop_words: frozenset = STOP_WORDS) -> None:
        self.stop_words = stop_words

    def keywords(
        self,
        title: Optional[str],
        description: Optional[str],
        skills: Iterable[str] = (),
    ) -> List[Keyword]:
        """Deduplicated keywords from skills, description and title, in that order."""
        found: Dict[str, bool] = {}
        for skill in skills:
            term = normalize(skill).strip()
            if term:
                found[term] = True
        for text in (description, title):
            for term in tokenize(normalize(text), self.stop_words):
                found.setdefault(term, False)
        return [Keyword(term=term, is_skill=is_skill) for term, is_skill in found.items()]

    def overlap(
        self,
        resume_text: Optional[str],
        title: Optional[str],
        description: Optional[str],
        skills: Iterable[str] = (),
    ) -> int:
        keywords = self.keywords(title, description, skills)
        if not keywords:
            return 0
        resume = normalize(resume_text)
        matched = 0.0
        for keyword in keywords:
            if keyword.term in resume:
                matched += self.MATCH_WEIGHT
                if keyword.is_skill:
                    matched += self.SKILL_BONUS
        return to_percentage(matched / len(keywords))

    def score(self, resume_text: Optional[str], job: JobRecord) -> int:
        return self.overlap(resume_text, job.title, job.description, job.skill_names)


_STRATEGIES = {
    Strategy.VECTOR_SPACE: VectorSpaceScorer,
    Strategy.KEYWORD_OVERLAP: KeywordOverlapScorer,
}


def get_strategy(name: "Strategy | str" = Strategy.VECTOR_SPACE) -> ScoringStrategy:
    """Instantiate the scorer registered under ``name``."""
    try:
        strategy = Strategy(name)
    except ValueError as exc:
        raise ValueError(f"Unsupported scoring strategy: {name}") from exc
    logger.debug("Using %s scoring strategy", strategy.value)
    return _STRATEGIES[strategy]()
