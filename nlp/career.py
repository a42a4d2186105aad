"""Optional career-path analysis over résumé text.

Sends the résumé to a local Ollama model and returns the career analysis
JSON (``currentProfile`` plus ``recommendedPaths``). The structured parser
never calls into this module; the ingestion page invokes it on demand and
shows ``CareerAnalysisError`` as a recoverable warning.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)
if not logging.getLogger().handlers:
    logging.basicConfig(level=logging.INFO)


REQUIRED_KEYS = ("currentProfile", "recommendedPaths")

_ENV_LOADED = False


class CareerAnalysisError(RuntimeError):
    """The analysis service was unreachable or answered with unusable data."""


def _load_local_env() -> None:
    global _ENV_LOADED
    if _ENV_LOADED:
        return
    env_path = Path(__file__).resolve().parent.parent / ".env"
    if env_path.exists():
        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            os.environ.setdefault(key.strip(), value.strip())
    _ENV_LOADED = True


def _build_prompt(resume_text: str) -> str:
    return (
        "Analyze the following resume text and provide a detailed career path analysis. "
        "Respond strictly as JSON with keys 'currentProfile' (object with 'title', 'summary', "
        "'extractedSkills': list of {name, level 1-100, category Technical|Soft|Domain}) and "
        "'recommendedPaths' (list of {role, description, salaryExpectation, matchScore 1-100, "
        "gapAnalysis: list of strings, roadmap: list of {phase, objective, skillsToLearn, duration, "
        "resources: list of {title, type, provider, link, relevance}}}).\n\n"
        f"Resume text:\n{resume_text[:6000]}\n\nJSON response:"
    )


def _call_ollama(model: str, prompt: str) -> str:
    base_url = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434").rstrip("/")
    payload = {
        "model": model,
        "prompt": prompt,
        "stream": False,
        "format": "json",
        "options": {"temperature": 0},
    }
    try:
        timeout = float(os.getenv("CAREER_ANALYSIS_TIMEOUT", "60"))
        response = requests.post(f"{base_url}/api/generate", json=payload, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except (requests.RequestException, ValueError) as err:
        logger.exception("[career] ollama call failed: %s", err)
        raise CareerAnalysisError(f"Career analysis request failed: {err}") from err
    raw = data.get("response", "") if isinstance(data, dict) else ""
    logger.info("[career] ollama raw response chars=%d", len(raw))
    return raw


def analyze_career_path(resume_text: str, *, model: Optional[str] = None) -> Dict[str, Any]:
    """Return the career analysis for ``resume_text``.

    Raises ``CareerAnalysisError`` when the text is empty, the service is
    unreachable, or the reply is not the expected JSON object.
    """
    text = (resume_text or "").strip()
    if not text:
        raise CareerAnalysisError("No resume text to analyze.")

    _load_local_env()
    chosen_model = model or os.getenv("OLLAMA_MODEL", "mistral")
    raw = _call_ollama(chosen_model, _build_prompt(text))
    if not raw.strip():
        raise CareerAnalysisError("Career analysis returned an empty response.")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as err:
        logger.info("[career] response not JSON; giving up")
        raise CareerAnalysisError("Career analysis response was not valid JSON.") from err

    if not isinstance(data, dict) or any(key not in data for key in REQUIRED_KEYS):
        raise CareerAnalysisError("Career analysis response is missing required fields.")
    return data


__all__ = ["CareerAnalysisError", "analyze_career_path"]
