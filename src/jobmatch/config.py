"""Configuration models for the job matcher."""
from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from .scoring import Strategy


class ResumeFetchSettings(BaseModel):
    """How resume text is fetched from remote storage."""

    timeout: float = Field(30.0, gt=0.0, description="Request timeout in seconds")
    max_retries: int = Field(2, ge=0)
    backoff_factor: float = Field(0.5, ge=0.0)


class MatchConfig(BaseModel):
    """Top level configuration for matching."""

    strategy: Strategy = Strategy.VECTOR_SPACE
    resume: ResumeFetchSettings = Field(default_factory=ResumeFetchSettings)

    @classmethod
    def from_file(cls, path: Path) -> "MatchConfig":
        """Load configuration from a JSON or YAML file."""
        path = path.expanduser()
        if not path.exists():
            raise FileNotFoundError(path)
        content = path.read_text(encoding="utf-8")
        if path.suffix.lower() in {".yaml", ".yml"}:
            try:
                import yaml  # type: ignore
            except ImportError as exc:  # pragma: no cover - optional dependency
                raise RuntimeError(
                    "YAML support requires the optional 'pyyaml' dependency"
                ) from exc
            data = yaml.safe_load(content) or {}
        else:
            import json

            data = json.loads(content)
        return cls.model_validate(data)
