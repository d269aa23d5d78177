"""Unit tests for the resume document structure."""

import pytest

from resumeforge.contexts.document import (
    ExperienceEntry,
    MalformedDocument,
    ResumeDocument,
)


class TestFromDict:
    """Building documents from persisted data."""

    @pytest.mark.unit
    def test_camel_case_keys(self, full_resume_data):
        document = ResumeDocument.from_dict(full_resume_data)

        assert document.personal_info.full_name == "Ada Lovelace"
        assert document.experience[0].start_date == "2019-01"
        assert document.experience[0].current is True
        assert document.education[0].graduation_date == "2015-06"
        assert document.selected_template == "classic"

    @pytest.mark.unit
    def test_snake_case_keys(self):
        document = ResumeDocument.from_dict(
            {
                "personal_info": {"full_name": "Grace Hopper"},
                "experience": [{"company": "Navy", "start_date": "1943", "current": "false"}],
                "selected_template": "minimal",
            }
        )

        assert document.personal_info.full_name == "Grace Hopper"
        assert document.experience[0].start_date == "1943"
        assert document.experience[0].current is False
        assert document.selected_template == "minimal"

    @pytest.mark.unit
    def test_missing_leaves_default_to_empty(self):
        document = ResumeDocument.from_dict(
            {"personalInfo": {"email": None}, "summary": None, "experience": [{}]}
        )

        assert document.personal_info.email == ""
        assert document.summary == ""
        assert document.education == []
        assert document.skills == []
        assert document.selected_template == "modern"
        assert document.experience[0].id

    @pytest.mark.unit
    def test_to_dict_round_trips(self, full_resume_data):
        document = ResumeDocument.from_dict(full_resume_data)
        assert document.to_dict() == full_resume_data


class TestMalformedDocuments:
    """Structural problems are reported with the offending path."""

    @pytest.mark.unit
    @pytest.mark.parametrize("data", [{}, {"personalInfo": None}])
    def test_missing_personal_info(self, data):
        with pytest.raises(MalformedDocument) as exc_info:
            ResumeDocument.from_dict(data)
        assert exc_info.value.path == "personalInfo"

    @pytest.mark.unit
    def test_root_must_be_mapping(self):
        with pytest.raises(MalformedDocument):
            ResumeDocument.from_dict(["not", "a", "resume"])

    @pytest.mark.unit
    def test_section_must_be_list(self):
        with pytest.raises(MalformedDocument) as exc_info:
            ResumeDocument.from_dict({"personalInfo": {}, "skills": "Python, SQL"})
        assert exc_info.value.path == "skills"

    @pytest.mark.unit
    def test_entry_must_be_mapping(self):
        with pytest.raises(MalformedDocument) as exc_info:
            ResumeDocument.from_dict({"personalInfo": {}, "experience": [{}, "Acme"]})
        assert exc_info.value.path == "experience[1]"

    @pytest.mark.unit
    def test_unknown_template(self):
        with pytest.raises(MalformedDocument, match="Unknown template 'fancy'"):
            ResumeDocument.from_dict({"personalInfo": {}, "selectedTemplate": "fancy"})


@pytest.mark.unit
def test_add_skill_rejects_blanks_and_duplicates():
    document = ResumeDocument.empty()

    assert document.add_skill(" Python ") is True
    assert document.add_skill("Python") is False
    assert document.add_skill("   ") is False
    assert document.skills == ["Python"]


@pytest.mark.unit
def test_remove_entries_by_id():
    first, second = ExperienceEntry(company="A"), ExperienceEntry(company="B")
    document = ResumeDocument(experience=[first, second])

    assert document.remove_experience(first.id) is True
    assert document.remove_experience(first.id) is False
    assert [entry.company for entry in document.experience] == ["B"]
    assert document.remove_education("missing") is False


@pytest.mark.unit
def test_new_entries_get_unique_ids():
    assert ExperienceEntry().id != ExperienceEntry().id
