"""Résumé text extraction."""

from nlp.parser import parse_resume_text, set_debug
from nlp.records import ExperienceEntry, ParsedResume, ProjectEntry, Section

__all__ = [
    "ExperienceEntry",
    "ParsedResume",
    "ProjectEntry",
    "Section",
    "parse_resume_text",
    "set_debug",
]
