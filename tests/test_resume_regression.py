import json
from pathlib import Path

import nlp.parser as parser_module


parse_resume_text = parser_module.parse_resume_text


FIXTURE_PATH = Path(__file__).resolve().parent / "fixtures" / "resume_samples.json"


def test_resume_regressions():
    samples = json.loads(FIXTURE_PATH.read_text(encoding="utf-8"))
    for sample in samples:
        expected = sample["expected"]

        result = parse_resume_text(sample["text"])

        assert result.detected_name == expected["name"]
        assert result.name_certainty is expected["name_certainty"]
        assert result.role == expected["role"]
        assert result.location == expected["location"]
        assert result.contact_email == expected["email"]
        assert result.contact_phone == expected["phone"]
        assert list(result.contact_links) == expected["links"]
        assert result.summary_text == expected["summary"]

        assert len(result.experience) == len(expected["experience"])
        for entry, wanted in zip(result.experience, expected["experience"]):
            assert entry.company == wanted["company"]
            assert entry.dates == wanted["dates"]
            assert entry.title == wanted["title"]
            assert entry.location == wanted["location"]
            assert len(entry.bullets) == wanted["bullets"]

        assert [p.name for p in result.projects] == expected["projects"]
        assert list(result.flat_skills) == expected["skills"]
        assert list(result.certifications) == expected["certifications"]
