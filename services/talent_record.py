"""Map a ``ParsedResume`` onto the talent-record autofill payload."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from nlp.records import ParsedResume


def _coerce_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    return str(value).strip()


def _text_list(values: Optional[Iterable[str]]) -> List[str]:
    if not values:
        return []
    return [_coerce_text(value) for value in values if _coerce_text(value)]


def build_talent_record(
    parsed: ParsedResume,
    *,
    record_id: str = "",
    file_name: str = "",
    unit: str = "",
    status: str = "ONBOARDING",
) -> Dict[str, Any]:
    """Return the autofill dictionary consumed by the ingestion form."""

    record: Dict[str, Any] = {
        "id": _coerce_text(record_id),
        "name": _coerce_text(parsed.detected_name),
        "nameCertain": bool(parsed.name_certainty),
        "role": _coerce_text(parsed.role),
        "location": _coerce_text(parsed.location),
        "unit": _coerce_text(unit),
        "status": _coerce_text(status),
        "resumeFileName": _coerce_text(file_name),
        "resumeText": parsed.raw_text,
        "resumeLines": list(parsed.normalized_lines),
        "skillsRaw": list(parsed.flat_skills),
        "skillsGrouped": {key: list(values) for key, values in parsed.skill_buckets.items()},
        "summaryText": _coerce_text(parsed.summary_text),
        "experienceExtracted": [
            {
                "company": _coerce_text(entry.company),
                "title": _coerce_text(entry.title),
                "dates": _coerce_text(entry.dates),
                "location": _coerce_text(entry.location),
                "bullets": _text_list(entry.bullets),
            }
            for entry in parsed.experience
        ],
        "projectsExtracted": [
            {"name": _coerce_text(project.name), "bullets": _text_list(project.bullets)}
            for project in parsed.projects
        ],
        "educationExtracted": _text_list(parsed.education),
        "certificationsExtracted": _text_list(parsed.certifications),
        "contactEmail": _coerce_text(parsed.contact_email),
        "contactPhone": _coerce_text(parsed.contact_phone),
        "contactLinks": _text_list(parsed.contact_links),
    }
    return record


__all__ = ["build_talent_record"]
