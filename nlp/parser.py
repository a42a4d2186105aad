# parser.py
# --- Structured résumé extraction from raw text ---

import logging
import re
from typing import Any, Dict, List, Optional, Tuple

from nlp.records import (
    SKILL_BUCKETS,
    ExperienceEntry,
    ParsedResume,
    ProjectEntry,
    Section,
    SkillBucketMap,
    freeze_buckets,
)

logger = logging.getLogger(__name__)


# ---- Debug utilities ----

_DEBUG = False


def set_debug(enabled: bool) -> None:
    """Toggle step-by-step debug output for this module."""
    global _DEBUG
    _DEBUG = enabled


def _debug(step: str, detail: Optional[str] = None) -> None:
    """Emit a debug line when debugging is enabled."""
    if not _DEBUG:
        return
    if detail:
        logger.info("[parser] %s: %s", step, detail)
    else:
        logger.info("[parser] %s", step)


# ---- Line normalizer ----

_WS_RE = re.compile(r"\s+")


def normalize_lines(text: str) -> List[str]:
    """Trim, drop blank lines and collapse internal whitespace runs."""
    stripped = [ln.strip() for ln in (text or "").splitlines()]
    lines = [_WS_RE.sub(" ", ln) for ln in stripped if ln]
    _debug("normalize_lines", f"kept {len(lines)} lines")
    return lines


# ---- Contact extractors ----

_EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
_PHONE_RE = re.compile(r"(?:\+?\d{1,2}\s?)?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}")
_URL_RE = re.compile(r"https?://\S+|www\.\S+")


def extract_email(text: str) -> Optional[str]:
    match = _EMAIL_RE.search(text or "")
    return match.group(0) if match else None


def extract_phone(text: str) -> Optional[str]:
    match = _PHONE_RE.search(text or "")
    return match.group(0) if match else None


def extract_links(text: str) -> List[str]:
    links = [m.group(0) for m in _URL_RE.finditer(text or "")]
    _debug("extract_links", f"found {len(links)}")
    return links


# ---- Sectionizer ----

SECTION_HEADERS: Dict[str, Section] = {
    "SUMMARY": Section.SUMMARY,
    "EDUCATION": Section.EDUCATION,
    "EXPERIENCE": Section.EXPERIENCE,
    "PROJECTS": Section.PROJECTS,
    "TECHNICAL SKILLS": Section.TECHNICAL_SKILLS,
    "CERTIFICATIONS": Section.CERTIFICATIONS,
    "PROFESSIONAL SKILLS": Section.PROFESSIONAL_SKILLS,
}


def segment_sections(lines: List[str]) -> Dict[Section, List[str]]:
    """Bucket lines under the most recent exact header match.

    Header lines themselves are consumed; anything before the first header
    lands in ``Section.HEADER``.
    """
    sections: Dict[Section, List[str]] = {section: [] for section in Section}
    current = Section.HEADER
    for ln in lines:
        header = SECTION_HEADERS.get(ln.upper())
        if header is not None:
            current = header
            continue
        sections[current].append(ln)
    found = [s.value for s, bucket in sections.items() if bucket]
    _debug("segment_sections", f"sections={found}")
    return sections


# ---- Name detection ----

_NAME_SEPARATORS_RE = re.compile(r"[|•\-—]")


def _clean_name_line(line: str) -> str:
    cleaned = _EMAIL_RE.sub("", line)
    cleaned = _PHONE_RE.sub("", cleaned)
    cleaned = _URL_RE.sub("", cleaned)
    cleaned = _NAME_SEPARATORS_RE.sub(" ", cleaned)
    return _WS_RE.sub(" ", cleaned).strip()


def detect_name(lines: List[str]) -> Tuple[str, bool]:
    """Return ``(name, certain)`` from the first two lines.

    One word may start lowercase to allow particles such as "van" or "de".
    """
    for ln in lines[:2]:
        cleaned = _clean_name_line(ln)
        words = [w for w in cleaned.split(" ") if len(w) > 1]
        if not 2 <= len(words) <= 5:
            continue
        capitalised = sum(1 for w in words if w[0].isupper())
        if capitalised >= len(words) - 1:
            _debug("detect_name", cleaned)
            return cleaned, True
    _debug("detect_name", "no match")
    return "", False


# ---- Experience extraction ----

BULLET_GLYPHS = ("•", "-", "*")
MONTH_PATTERN = (
    r"Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|Jul(?:y)?|"
    r"Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?"
)
_YEAR_TOKEN_RE = re.compile(r"[A-Z][a-z]{2,8}\s\d{4}|\d{4}")
_COMPANY_CUT_RE = re.compile(rf"\b(?:{MONTH_PATTERN})\b|\d{{4}}")
_DATE_RANGE_RE = re.compile(
    rf"\b(?:{MONTH_PATTERN})\s\d{{4}}\s[–-]\s(?:Present|(?:{MONTH_PATTERN})\s\d{{4}})"
    r"|\d{4}\s[–-]\s\d{4}"
)
_BULLET_PREFIX_RE = re.compile(r"^[•\-*]\s?")
_TITLE_SPLIT_RE = re.compile(r"[|,]")


def is_bullet(line: str) -> bool:
    return line.startswith(BULLET_GLYPHS)


def _strip_bullet(line: str) -> str:
    return _BULLET_PREFIX_RE.sub("", line).strip()


def is_date_range_header(line: str) -> bool:
    if is_bullet(line):
        return False
    if not _YEAR_TOKEN_RE.search(line):
        return False
    return "Present" in line or "–" in line or "-" in line


def _company_from_header(line: str) -> str:
    head = _COMPANY_CUT_RE.split(line, maxsplit=1)[0]
    return head.strip().rstrip("-–—").strip()


def _freeze_experience(draft: Dict[str, Any]) -> ExperienceEntry:
    return ExperienceEntry(
        company=draft["company"],
        dates=draft["dates"],
        title=draft["title"],
        location=draft["location"],
        bullets=tuple(draft["bullets"]),
    )


def parse_experience(lines: List[str]) -> List[ExperienceEntry]:
    entries: List[ExperienceEntry] = []
    current: Optional[Dict[str, Any]] = None

    for ln in lines:
        if is_date_range_header(ln):
            if current is not None:
                entries.append(_freeze_experience(current))
            dates = _DATE_RANGE_RE.search(ln)
            current = {
                "company": _company_from_header(ln),
                "dates": dates.group(0) if dates else "",
                "title": None,
                "location": None,
                "bullets": [],
            }
            continue

        if current is None:
            continue

        if is_bullet(ln):
            current["bullets"].append(_strip_bullet(ln))
        elif current["title"] is None:
            parts = _TITLE_SPLIT_RE.split(ln)
            current["title"] = parts[0].strip()
            if len(parts) > 1:
                current["location"] = parts[1].strip()

    if current is not None:
        entries.append(_freeze_experience(current))

    _debug("parse_experience", f"found {len(entries)}")
    return entries


# ---- Projects extraction ----

PROJECT_TITLE_MIN = 5
PROJECT_TITLE_MAX = 100


def parse_projects(lines: List[str]) -> List[ProjectEntry]:
    projects: List[ProjectEntry] = []
    name: Optional[str] = None
    bullets: List[str] = []

    for ln in lines:
        if not is_bullet(ln) and PROJECT_TITLE_MIN < len(ln) < PROJECT_TITLE_MAX:
            if name is not None:
                projects.append(ProjectEntry(name=name, bullets=tuple(bullets)))
            name, bullets = ln, []
        elif name is not None and is_bullet(ln):
            bullets.append(_strip_bullet(ln))

    if name is not None:
        projects.append(ProjectEntry(name=name, bullets=tuple(bullets)))

    _debug("parse_projects", f"found {len(projects)}")
    return projects


# ---- Skills extraction ----

SKILL_CATEGORY_LABELS: Dict[str, str] = {
    "LANGUAGES": "Languages",
    "ML & AI": "ML_AI",
    "FRAMEWORKS & TOOLS": "Frameworks_Tools",
    "CLOUD & ANALYTICS": "Cloud_Analytics",
    "TESTING & QUALITY ASSURANCE": "Testing_QA",
    "PRACTICES & CERTS": "Practices_Certs",
    "PROFESSIONAL SKILLS": "Professional_Skills",
}


def categorize_skills(lines: List[str]) -> SkillBucketMap:
    """Route ``Category: a, b, c`` lines into the canonical skill buckets."""
    buckets: Dict[str, List[str]] = {key: [] for key in SKILL_BUCKETS}
    for ln in lines:
        if ":" not in ln:
            continue
        category_raw, _, items_raw = ln.partition(":")
        target = SKILL_CATEGORY_LABELS.get(category_raw.strip().upper(), "Other")
        items = [item.strip() for item in items_raw.split(",")]
        buckets[target].extend(item for item in items if item)
    _debug("categorize_skills", ", ".join(f"{k}={len(v)}" for k, v in buckets.items() if v))
    return freeze_buckets(buckets)


def flatten_skills(buckets: SkillBucketMap) -> List[str]:
    flat: List[str] = []
    seen = set()
    for key in SKILL_BUCKETS:
        for skill in buckets.get(key, ()):
            if skill in seen:
                continue
            seen.add(skill)
            flat.append(skill)
    return flat


# ---- Master parse ----

def parse_resume_text(raw_text: str) -> ParsedResume:
    _debug("parse", "start")
    text = raw_text or ""
    lines = normalize_lines(text)
    sections = segment_sections(lines)

    name, certain = detect_name(lines)
    buckets = categorize_skills(sections[Section.TECHNICAL_SKILLS])
    location = next((ln for ln in sections[Section.HEADER] if ", " in ln), "")

    resume = ParsedResume(
        detected_name=name,
        name_certainty=certain,
        summary_text=" ".join(sections[Section.SUMMARY]),
        location=location,
        role=lines[1] if len(lines) > 1 else "",
        flat_skills=tuple(flatten_skills(buckets)),
        skill_buckets=buckets,
        normalized_lines=tuple(lines),
        experience=tuple(parse_experience(sections[Section.EXPERIENCE])),
        projects=tuple(parse_projects(sections[Section.PROJECTS])),
        education=tuple(sections[Section.EDUCATION]),
        certifications=tuple(sections[Section.CERTIFICATIONS]),
        raw_text=text,
        contact_email=extract_email(text),
        contact_phone=extract_phone(text),
        contact_links=tuple(extract_links(text)),
    )
    _debug("parse", "complete")
    return resume
