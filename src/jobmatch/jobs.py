"""Job record types consumed by the matcher."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence


@dataclass(slots=True, frozen=True)
class JobSkill:
    """A single skill listed on a job posting."""

    name: str


@dataclass(slots=True)
class JobRecord:
    """The fields of a job posting that take part in matching."""

    title: str = ""
    description: str = ""
    skills: Sequence[JobSkill] = field(default_factory=list)

    @property
    def skill_names(self) -> List[str]:
        return [skill.name for skill in self.skills if skill.name]

    def composite_text(self) -> str:
        """Title, description and skill names joined into one document."""
        return f"{self.title or ''} {self.description or ''} {' '.join(self.skill_names)}"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "JobRecord":
        """Build a record from a job row, ignoring fields not used for matching.

        Skills are read from ``skills`` (``{"name": ...}``) or, for job board
        rows, from ``job_skills`` (``{"skill_name": ...}``). Plain strings are
        accepted in either list.
        """
        raw_skills = data.get("skills")
        if raw_skills is None:
            raw_skills = data.get("job_skills")
        skills = [
            JobSkill(name=name)
            for name in (_skill_name(item) for item in raw_skills or [])
            if name
        ]
        return cls(
            title=data.get("title") or "",
            description=data.get("description") or "",
            skills=skills,
        )


def _skill_name(item: Any) -> Optional[str]:
    if isinstance(item, str):
        return item
    if isinstance(item, JobSkill):
        return item.name
    if isinstance(item, Mapping):
        return item.get("name") or item.get("skill_name")
    return None
