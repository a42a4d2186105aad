# data_loader.py

from pathlib import Path
from typing import Union
from docx import Document
import fitz  # PyMuPDF


SUPPORTED_SUFFIXES = (".pdf", ".docx", ".txt")


class DocumentReadError(RuntimeError):
    """A supported document could not be turned into text."""


class UnsupportedDocumentError(ValueError):
    """The file type has no reader."""


def _read_pdf(path: Union[str, Path]) -> str:
    text_parts = []
    with fitz.open(str(path)) as pdf:
        for page in pdf:
            text_parts.append(page.get_text("text"))
    return "\n".join(text_parts)


def _read_docx(path: Union[str, Path]) -> str:
    doc = Document(str(path))
    return "\n".join(p.text for p in doc.paragraphs)


def _read_txt(path: Union[str, Path]) -> str:
    return Path(path).read_text(encoding="utf-8", errors="ignore")


_READERS = {
    ".pdf": _read_pdf,
    ".docx": _read_docx,
    ".txt": _read_txt,
}


def load_resume(file_path: Union[str, Path]) -> str:
    """
    Load and return raw text from a resume file (.pdf, .docx, .txt).
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"No such file: {path}")

    reader = _READERS.get(path.suffix.lower())
    if reader is None:
        raise UnsupportedDocumentError("Unsupported file type. Use PDF, DOCX, or TXT.")

    try:
        text = reader(path)
    except Exception as err:
        raise DocumentReadError(f"Could not read {path.name}: {err}") from err

    return text.strip()
