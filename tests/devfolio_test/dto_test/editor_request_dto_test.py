from unittest import TestCase, main
from pydantic import ValidationError
from devfolio.dto.editor_request_dto import (
    EducationRequestDto,
    ExperienceRequestDto,
    ProfileRequestDto,
    ProjectRequestDto,
    SkillRequestDto,
)


class TestEditorRequestDto(TestCase):
    def test_education_coerces_form_values(self):
        dto = EducationRequestDto.model_validate(
            {
                "degree": "BSc Computer Engineering",
                "institution": "State University",
                "startDate": "2016-09",
                "endDate": "",
                "gpa": "  ",
                "achievements": "Dean's List, , Honors",
            }
        )

        self.assertEqual(
            dto.to_row(),
            {
                "degree": "BSc Computer Engineering",
                "institution": "State University",
                "start_date": "2016-09",
                "end_date": None,
                "description": None,
                "gpa": None,
                "achievements": ["Dean's List", "Honors"],
            },
        )

    def test_required_fields_must_not_be_blank(self):
        with self.assertRaises(ValidationError):
            ExperienceRequestDto.model_validate({"title": " ", "company": "Acme"})

    def test_smuggled_owner_id_is_rejected(self):
        with self.assertRaises(ValidationError):
            ExperienceRequestDto.model_validate(
                {"title": "Engineer", "company": "Acme", "userId": "someone-else"}
            )

    def test_invalid_date_is_rejected(self):
        with self.assertRaises(ValidationError):
            ExperienceRequestDto.model_validate(
                {"title": "Engineer", "company": "Acme", "startDate": "soon"}
            )

    def test_project_defaults(self):
        dto = ProjectRequestDto.model_validate(
            {"title": "Portfolio", "technologies": "", "featured": ""}
        )

        self.assertFalse(dto.featured)
        self.assertIsNone(dto.technologies)

    def test_skill_level_is_clamped(self):
        self.assertEqual(
            SkillRequestDto(category="Other", name="Git", level=7).level, 5
        )
        self.assertEqual(SkillRequestDto(category="Other", name="Git").level, 1)

    def test_profile_blank_fields_become_none(self):
        dto = ProfileRequestDto.model_validate({"fullName": "Ada", "bio": ""})

        self.assertEqual(dto.full_name, "Ada")
        self.assertIsNone(dto.bio)


if __name__ == "__main__":
    main()
