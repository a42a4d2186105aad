import json

from scripts.parse_resume import main


def test_cli_writes_talent_record(tmp_path):
    resume = tmp_path / "kenji.txt"
    resume.write_text("Kenji Sato\nSRE Engineer\nTokyo, Japan\n", encoding="utf-8")
    output = tmp_path / "out" / "record.json"

    assert main([str(resume), "--record", "--output", str(output)]) == 0

    record = json.loads(output.read_text(encoding="utf-8"))
    assert record["name"] == "Kenji Sato"
    assert record["location"] == "Tokyo, Japan"
    assert record["resumeFileName"] == "kenji.txt"


def test_cli_prints_parse_to_stdout(tmp_path, capsys):
    resume = tmp_path / "kenji.txt"
    resume.write_text("Kenji Sato\nSRE Engineer\n", encoding="utf-8")

    assert main([str(resume)]) == 0

    parsed = json.loads(capsys.readouterr().out)
    assert parsed["detected_name"] == "Kenji Sato"
    assert parsed["role"] == "SRE Engineer"


def test_cli_reports_notice_on_unreadable_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.pdf")]) == 1
    assert "manual entry remains available" in capsys.readouterr().err
