"""Document ingestion: read a résumé file and parse it for autofill.

Reader failures never propagate to the form. They are logged and reported
back through ``IngestionResult.notice`` so manual entry stays available.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from data_loader import DocumentReadError, UnsupportedDocumentError, load_resume
from nlp.parser import parse_resume_text
from nlp.records import ParsedResume

logger = logging.getLogger(__name__)

PARSE_FAILED_NOTICE = "Resume parsing failed; manual entry remains available."
LOW_CERTAINTY_NOTICE = "Name detection is uncertain; please confirm the candidate name."


@dataclass(frozen=True)
class IngestionResult:
    parsed: Optional[ParsedResume]
    file_name: str = ""
    notice: Optional[str] = None
    needs_review: bool = False

    @property
    def ok(self) -> bool:
        return self.parsed is not None


def ingest_text(text: str, file_name: str = "") -> IngestionResult:
    parsed = parse_resume_text(text)
    if not parsed.name_certainty:
        logger.info("[ingest] %s: name not detected with certainty", file_name or "<text>")
        return IngestionResult(parsed, file_name, LOW_CERTAINTY_NOTICE, needs_review=True)
    return IngestionResult(parsed, file_name)


def ingest_resume(file_path: Union[str, Path], file_name: Optional[str] = None) -> IngestionResult:
    """Load ``file_path`` and parse it, degrading to a notice on read errors."""
    path = Path(file_path)
    display_name = file_name or path.name
    try:
        text = load_resume(path)
    except (FileNotFoundError, UnsupportedDocumentError, DocumentReadError) as err:
        logger.exception("[ingest] failed to read %s: %s", display_name, err)
        return IngestionResult(None, display_name, PARSE_FAILED_NOTICE, needs_review=True)
    return ingest_text(text, display_name)


__all__ = [
    "IngestionResult",
    "LOW_CERTAINTY_NOTICE",
    "PARSE_FAILED_NOTICE",
    "ingest_resume",
    "ingest_text",
]
