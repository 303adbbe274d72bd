"""
Raw form state for each view.

Inputs are kept as the text the user typed. ``to_payload`` turns that text
into a typed payload, coercing numeric fields the way a number input does
("3" -> 3, "2.5" -> 2.5) and applying the input constraints declared on the
payload models.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from resultdesk.core.payloads import CoursePayload, GradeSheetFilter, ResultPayload, StudentPayload

P = TypeVar("P", bound=BaseModel)


class FormValidationError(ValueError):
    pass


def _current_year() -> str:
    return str(date.today().year)


def to_number(raw: str) -> Union[int, float, str, None]:
    """
    Blank text becomes None and text that is not a number is returned
    unchanged so the payload model can report it.
    """
    text = (raw or "").strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        return text
    return int(value) if value.is_integer() else value


def _describe(model: Type[BaseModel], exc: ValidationError) -> str:
    error = exc.errors()[0]
    name = str(error["loc"][0]) if error["loc"] else ""
    info = model.model_fields.get(name)
    label = info.title if info is not None and info.title else name.replace("_", " ").capitalize()
    raw = error.get("input")
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return f"{label} is required"
    return f"{label}: {error['msg']}"


def build_payload(model: Type[P], **values: Any) -> P:
    try:
        return model(**values)
    except ValidationError as exc:
        raise FormValidationError(_describe(model, exc)) from exc


@dataclass
class StudentForm:
    name: str = ""
    email: str = ""
    roll_number: str = ""
    department: str = ""
    semester: str = "1"
    year: str = field(default_factory=_current_year)

    def to_payload(self) -> StudentPayload:
        return build_payload(
            StudentPayload,
            name=self.name,
            email=self.email,
            roll_number=self.roll_number,
            department=self.department,
            semester=to_number(self.semester),
            year=to_number(self.year),
        )


@dataclass
class CourseForm:
    code: str = ""
    title: str = ""
    credits: str = "3"

    def to_payload(self) -> CoursePayload:
        return build_payload(
            CoursePayload,
            code=self.code,
            title=self.title,
            credits=to_number(self.credits),
        )


@dataclass
class ResultForm:
    student_id: str = ""
    course_id: str = ""
    score: str = "0"
    semester: str = "1"
    year: str = field(default_factory=_current_year)

    def to_payload(self) -> ResultPayload:
        return build_payload(
            ResultPayload,
            student_id=self.student_id,
            course_id=self.course_id,
            score=to_number(self.score),
            semester=to_number(self.semester),
            year=to_number(self.year),
        )


@dataclass
class GradeQuery:
    semester: str = ""
    year: str = ""

    def to_filter(self) -> GradeSheetFilter:
        return build_payload(
            GradeSheetFilter,
            semester=to_number(self.semester),
            year=to_number(self.year),
        )

    def to_params(self) -> dict:
        return self.to_filter().to_params()
