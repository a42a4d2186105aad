from services.ingestion import (
    LOW_CERTAINTY_NOTICE,
    PARSE_FAILED_NOTICE,
    ingest_resume,
    ingest_text,
)


def test_ingest_resume_parses_text_file(tmp_path):
    path = tmp_path / "jane.txt"
    path.write_text("Jane Doe\nData Engineer\nSeattle, WA\nTECHNICAL SKILLS\nLanguages: Python\n", encoding="utf-8")

    result = ingest_resume(path)

    assert result.ok
    assert result.file_name == "jane.txt"
    assert result.notice is None
    assert result.needs_review is False
    assert result.parsed.detected_name == "Jane Doe"
    assert result.parsed.flat_skills == ("Python",)


def test_unsupported_file_degrades_to_notice(tmp_path, caplog):
    path = tmp_path / "resume.pages"
    path.write_bytes(b"binary")

    result = ingest_resume(path, file_name="My Resume.pages")

    assert result.parsed is None
    assert not result.ok
    assert result.notice == PARSE_FAILED_NOTICE
    assert result.file_name == "My Resume.pages"
    assert any("failed to read" in record.getMessage() for record in caplog.records)


def test_missing_and_corrupt_files_degrade_to_notice(tmp_path):
    missing = ingest_resume(tmp_path / "gone.docx")
    assert missing.parsed is None
    assert missing.notice == PARSE_FAILED_NOTICE

    corrupt = tmp_path / "bad.docx"
    corrupt.write_bytes(b"not a zip")
    result = ingest_resume(corrupt)
    assert result.parsed is None
    assert result.notice == PARSE_FAILED_NOTICE


def test_low_name_certainty_flags_review():
    result = ingest_text("all lowercase name\nsome role", file_name="upload.txt")

    assert result.ok
    assert result.needs_review is True
    assert result.notice == LOW_CERTAINTY_NOTICE
    assert result.parsed.detected_name == ""
