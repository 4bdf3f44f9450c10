"""Command line interface to score resumes against jobs."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Optional, Sequence

from .config import MatchConfig
from .jobs import JobRecord
from .scoring import Strategy
from .service import MatchService
from .utils.resume_loader import load_resume_text, read_resume_text

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Score how well a resume matches a job")
    parser.add_argument("--config", type=Path, default=None, help="Path to a JSON or YAML config file")
    parser.add_argument(
        "--strategy",
        choices=[strategy.value for strategy in Strategy],
        default=None,
        help="Scoring strategy (overrides the config file)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    score = commands.add_parser("score", help="Score a resume against a job record")
    score.add_argument("resume", help="Path or URL of the plain text resume")
    score.add_argument("job", type=Path, help="JSON file holding the job record")

    compare = commands.add_parser("compare", help="Compare two plain text files")
    compare.add_argument("text_a", type=Path)
    compare.add_argument("text_b", type=Path)
    return parser.parse_args(argv)


def load_job(path: Path) -> JobRecord:
    data = json.loads(path.read_text(encoding="utf-8"))
    return JobRecord.from_mapping(data)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)
    config = MatchConfig.from_file(args.config) if args.config else MatchConfig()
    service = MatchService(args.strategy or config.strategy)

    if args.command == "score":
        resume_text = load_resume_text(args.resume, settings=config.resume)
        result = service.match_percentage(resume_text, load_job(args.job))
    else:
        result = service.semantic_similarity(
            read_resume_text(args.text_a), read_resume_text(args.text_b)
        )
    print(f"{result}%")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
