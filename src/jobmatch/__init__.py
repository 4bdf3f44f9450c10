"""Resume-to-job relevance scoring."""

from .config import MatchConfig
from .jobs import JobRecord, JobSkill
from .scoring import KeywordOverlapScorer, Strategy, VectorSpaceScorer, get_strategy
from .service import MatchService, match_percentage, semantic_similarity

__all__ = [
    "JobRecord",
    "JobSkill",
    "KeywordOverlapScorer",
    "MatchConfig",
    "MatchService",
    "Strategy",
    "VectorSpaceScorer",
    "get_strategy",
    "match_percentage",
    "semantic_similarity",
]
