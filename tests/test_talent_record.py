import json

from nlp.parser import parse_resume_text
from nlp.records import ParsedResume
from services.talent_record import build_talent_record


RESUME = """Lisa Brown
ML Engineer
San Francisco, CA
lisa@brown.ai | www.lisabrown.dev
SUMMARY
Builds ranking models.
EXPERIENCE
Orbit AI - Feb 2020 – Present
ML Engineer | Remote
- Shipped retrieval service
PROJECTS
Search Relevance Lab
- Offline evaluation harness
TECHNICAL SKILLS
ML & AI: PyTorch, XGBoost
EDUCATION
MS Statistics
CERTIFICATIONS
GCP Professional ML Engineer
"""


def test_build_talent_record_maps_parsed_fields():
    parsed = parse_resume_text(RESUME)
    record = build_talent_record(parsed, record_id=" EMP-012 ", file_name="lisa.pdf", unit="Engineering")

    assert record["id"] == "EMP-012"
    assert record["name"] == "Lisa Brown"
    assert record["nameCertain"] is True
    assert record["role"] == "ML Engineer"
    assert record["location"] == "San Francisco, CA"
    assert record["unit"] == "Engineering"
    assert record["status"] == "ONBOARDING"
    assert record["resumeFileName"] == "lisa.pdf"
    assert record["resumeText"] == RESUME
    assert record["summaryText"] == "Builds ranking models."
    assert record["skillsRaw"] == ["PyTorch", "XGBoost"]
    assert record["skillsGrouped"]["ML_AI"] == ["PyTorch", "XGBoost"]
    assert record["experienceExtracted"] == [
        {
            "company": "Orbit AI",
            "title": "ML Engineer",
            "dates": "Feb 2020 – Present",
            "location": "Remote",
            "bullets": ["Shipped retrieval service"],
        }
    ]
    assert record["projectsExtracted"] == [
        {"name": "Search Relevance Lab", "bullets": ["Offline evaluation harness"]}
    ]
    assert record["educationExtracted"] == ["MS Statistics"]
    assert record["certificationsExtracted"] == ["GCP Professional ML Engineer"]
    assert record["contactEmail"] == "lisa@brown.ai"
    assert record["contactPhone"] == ""
    assert record["contactLinks"] == ["www.lisabrown.dev"]

    json.dumps(record)


def test_build_talent_record_defaults():
    record = build_talent_record(ParsedResume())

    assert record["name"] == ""
    assert record["nameCertain"] is False
    assert record["contactEmail"] == ""
    assert record["skillsRaw"] == []
    assert record["experienceExtracted"] == []
    assert set(record["skillsGrouped"]) >= {"Languages", "Other"}
