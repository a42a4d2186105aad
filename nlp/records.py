"""Immutable records produced by ``nlp.parser.parse_resume_text``.

Entries are assembled from small mutable drafts while a section is being
walked and frozen once the entry closes, so a returned ``ParsedResume`` can
be handed to the caller without defensive copies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple


class Section(str, Enum):
    HEADER = "HEADER"
    SUMMARY = "SUMMARY"
    EDUCATION = "EDUCATION"
    EXPERIENCE = "EXPERIENCE"
    PROJECTS = "PROJECTS"
    TECHNICAL_SKILLS = "TECHNICAL_SKILLS"
    CERTIFICATIONS = "CERTIFICATIONS"
    PROFESSIONAL_SKILLS = "PROFESSIONAL_SKILLS"


# Declaration order is the flattening order for ``flat_skills``.
SKILL_BUCKETS: Tuple[str, ...] = (
    "Languages",
    "ML_AI",
    "Frameworks_Tools",
    "Cloud_Analytics",
    "Testing_QA",
    "Practices_Certs",
    "Professional_Skills",
    "Other",
)


class SkillBuckets(Mapping):
    """Read-only, hashable bucket map backed by a tuple of pairs."""

    __slots__ = ("_pairs",)

    def __init__(self, pairs: Iterable[Tuple[str, Iterable[str]]] = ()) -> None:
        object.__setattr__(self, "_pairs", tuple((key, tuple(values)) for key, values in pairs))

    def __getitem__(self, key: str) -> Tuple[str, ...]:
        for name, values in self._pairs:
            if name == key:
                return values
        raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("SkillBuckets is immutable")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SkillBuckets):
            return self._pairs == other._pairs
        return Mapping.__eq__(self, other)

    def __hash__(self) -> int:
        return hash(self._pairs)

    def __reduce__(self):
        return (SkillBuckets, (self._pairs,))

    def __repr__(self) -> str:
        return f"SkillBuckets({dict(self._pairs)!r})"


SkillBucketMap = SkillBuckets


def freeze_buckets(buckets: Mapping[str, List[str]]) -> SkillBuckets:
    """Return a read-only bucket map with every known bucket key present."""
    return SkillBuckets((key, buckets.get(key, ())) for key in SKILL_BUCKETS)


@dataclass(frozen=True)
class ExperienceEntry:
    company: str
    dates: str
    title: Optional[str] = None
    location: Optional[str] = None
    bullets: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "company": self.company,
            "dates": self.dates,
            "title": self.title,
            "location": self.location,
            "bullets": list(self.bullets),
        }


@dataclass(frozen=True)
class ProjectEntry:
    name: str
    bullets: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "bullets": list(self.bullets)}


@dataclass(frozen=True)
class ParsedResume:
    """Structured view of one résumé's text."""

    detected_name: str = ""
    name_certainty: bool = False
    summary_text: str = ""
    location: str = ""
    role: str = ""
    flat_skills: Tuple[str, ...] = ()
    skill_buckets: SkillBucketMap = field(default_factory=lambda: freeze_buckets({}))
    normalized_lines: Tuple[str, ...] = ()
    experience: Tuple[ExperienceEntry, ...] = ()
    projects: Tuple[ProjectEntry, ...] = ()
    education: Tuple[str, ...] = ()
    certifications: Tuple[str, ...] = ()
    raw_text: str = ""
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    contact_links: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serialisable copy of the record."""
        return {
            "detected_name": self.detected_name,
            "name_certainty": self.name_certainty,
            "summary_text": self.summary_text,
            "location": self.location,
            "role": self.role,
            "flat_skills": list(self.flat_skills),
            "skill_buckets": {key: list(values) for key, values in self.skill_buckets.items()},
            "normalized_lines": list(self.normalized_lines),
            "experience": [entry.to_dict() for entry in self.experience],
            "projects": [project.to_dict() for project in self.projects],
            "education": list(self.education),
            "certifications": list(self.certifications),
            "raw_text": self.raw_text,
            "contact_email": self.contact_email,
            "contact_phone": self.contact_phone,
            "contact_links": list(self.contact_links),
        }


__all__ = [
    "ExperienceEntry",
    "ParsedResume",
    "ProjectEntry",
    "SKILL_BUCKETS",
    "Section",
    "SkillBucketMap",
    "SkillBuckets",
    "freeze_buckets",
]
