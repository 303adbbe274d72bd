import unittest
from datetime import date

from resultdesk.core.forms import (
    CourseForm,
    FormValidationError,
    GradeQuery,
    ResultForm,
    StudentForm,
    to_number,
)


class NumberCoercionTests(unittest.TestCase):
    def test_integral_text_becomes_int(self):
        self.assertEqual(to_number("3"), 3)
        self.assertIsInstance(to_number(" 12 "), int)
        self.assertIsInstance(to_number("4.0"), int)

    def test_fractional_text_becomes_float(self):
        self.assertEqual(to_number("2.5"), 2.5)

    def test_blank_and_garbage(self):
        self.assertIsNone(to_number(""))
        self.assertIsNone(to_number("   "))
        self.assertEqual(to_number("abc"), "abc")


class StudentFormTests(unittest.TestCase):
    def _filled(self, **overrides) -> StudentForm:
        values = dict(
            name="Asha Rao",
            email="asha@example.edu",
            roll_number="CS-042",
            department="CSE",
            semester="2",
            year="2024",
        )
        values.update(overrides)
        return StudentForm(**values)

    def test_defaults(self):
        form = StudentForm()
        self.assertEqual(form.semester, "1")
        self.assertEqual(form.year, str(date.today().year))
        self.assertEqual(form.name, "")

    def test_payload_has_numeric_semester_and_year(self):
        payload = self._filled().to_payload().model_dump()
        self.assertEqual(
            payload,
            {
                "name": "Asha Rao",
                "email": "asha@example.edu",
                "roll_number": "CS-042",
                "department": "CSE",
                "semester": 2,
                "year": 2024,
            },
        )
        self.assertIsInstance(payload["semester"], int)

    def test_text_is_trimmed(self):
        payload = self._filled(name="  Asha Rao ").to_payload()
        self.assertEqual(payload.name, "Asha Rao")

    def test_required_field(self):
        with self.assertRaises(FormValidationError) as ctx:
            self._filled(name="").to_payload()
        self.assertEqual(str(ctx.exception), "Full name is required")

    def test_semester_range(self):
        with self.assertRaises(FormValidationError) as ctx:
            self._filled(semester="13").to_payload()
        self.assertTrue(str(ctx.exception).startswith("Semester:"))

    def test_year_range(self):
        with self.assertRaises(FormValidationError):
            self._filled(year="1999").to_payload()

    def test_email_shape(self):
        with self.assertRaises(FormValidationError) as ctx:
            self._filled(email="not-an-email").to_payload()
        self.assertTrue(str(ctx.exception).startswith("Email:"))


class CourseFormTests(unittest.TestCase):
    def test_defaults(self):
        self.assertEqual(CourseForm(), CourseForm(code="", title="", credits="3"))

    def test_integral_credits_serialise_as_int(self):
        payload = CourseForm(code="CS101", title="Intro", credits="3").to_payload().model_dump()
        self.assertEqual(payload, {"code": "CS101", "title": "Intro", "credits": 3})
        self.assertIsInstance(payload["credits"], int)

    def test_half_credits(self):
        payload = CourseForm(code="LAB1", title="Lab", credits="1.5").to_payload()
        self.assertEqual(payload.model_dump()["credits"], 1.5)

    def test_credits_step_and_minimum(self):
        with self.assertRaises(FormValidationError):
            CourseForm(code="X", title="Y", credits="2.3").to_payload()
        with self.assertRaises(FormValidationError):
            CourseForm(code="X", title="Y", credits="-1").to_payload()


class ResultFormTests(unittest.TestCase):
    def test_defaults(self):
        form = ResultForm()
        self.assertEqual((form.student_id, form.course_id, form.score, form.semester), ("", "", "0", "1"))

    def test_selection_required(self):
        with self.assertRaises(FormValidationError) as ctx:
            ResultForm(course_id="c1", score="80").to_payload()
        self.assertEqual(str(ctx.exception), "Student is required")

    def test_score_must_be_whole_and_in_range(self):
        with self.assertRaises(FormValidationError):
            ResultForm(student_id="s1", course_id="c1", score="85.5").to_payload()
        with self.assertRaises(FormValidationError):
            ResultForm(student_id="s1", course_id="c1", score="101").to_payload()

    def test_payload(self):
        payload = ResultForm(student_id="s1", course_id="c1", score="78", semester="3", year="2025").to_payload()
        self.assertEqual(
            payload.model_dump(),
            {"student_id": "s1", "course_id": "c1", "score": 78, "semester": 3, "year": 2025},
        )


class GradeQueryTests(unittest.TestCase):
    def test_blank_filters_are_omitted(self):
        self.assertEqual(GradeQuery().to_params(), {})

    def test_only_supplied_filters(self):
        self.assertEqual(GradeQuery(semester="2").to_params(), {"semester": "2"})
        self.assertEqual(GradeQuery(year="2024").to_params(), {"year": "2024"})
        self.assertEqual(GradeQuery(semester="2", year="2024").to_params(), {"semester": "2", "year": "2024"})

    def test_filter_range(self):
        with self.assertRaises(FormValidationError):
            GradeQuery(semester="0").to_params()


if __name__ == "__main__":
    unittest.main()
