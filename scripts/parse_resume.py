"""Parse a résumé document and emit the structured result as JSON.

Usage
-----

    python scripts/parse_resume.py path/to/resume.pdf --output out/resume.json
    python scripts/parse_resume.py path/to/resume.docx --record --debug

With ``--record`` the talent-record autofill payload is written instead of
the raw parse.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from nlp.parser import set_debug  # noqa: E402
from services.ingestion import ingest_resume  # noqa: E402
from services.talent_record import build_talent_record  # noqa: E402


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Extract a structured talent record from a resume file")
    parser.add_argument("resume", help="Path to a .pdf, .docx or .txt resume")
    parser.add_argument("--output", default=None, help="Destination JSON file (defaults to stdout)")
    parser.add_argument("--record", action="store_true", help="Emit the talent-record autofill payload")
    parser.add_argument("--debug", action="store_true", help="Log parser steps")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.debug else logging.WARNING)
    set_debug(args.debug)
    try:
        result = ingest_resume(args.resume)
    finally:
        set_debug(False)

    if result.parsed is None:
        print(result.notice, file=sys.stderr)
        return 1
    if result.notice:
        print(result.notice, file=sys.stderr)

    if args.record:
        payload = build_talent_record(result.parsed, file_name=result.file_name)
    else:
        payload = result.parsed.to_dict()

    rendered = json.dumps(payload, indent=2, ensure_ascii=False)
    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(rendered + "\n", encoding="utf-8")
        print(f"Wrote parsed resume to {output_path}")
    else:
        print(rendered)
    return 0


if __name__ == "__main__":
    sys.exit(main())
