from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+$"


class _Payload(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)


class StudentPayload(_Payload):
    name: str = Field(min_length=1, title="Full name")
    email: str = Field(min_length=1, pattern=EMAIL_PATTERN, title="Email")
    roll_number: str = Field(min_length=1, title="Roll number")
    department: str = Field(min_length=1, title="Department")
    semester: int = Field(ge=1, le=12, title="Semester")
    year: int = Field(ge=2000, le=2100, title="Year")


class CoursePayload(_Payload):
    code: str = Field(min_length=1, title="Course code")
    title: str = Field(min_length=1, title="Title")
    credits: float = Field(ge=0, multiple_of=0.5, allow_inf_nan=False, title="Credits")

    @field_serializer("credits")
    def _serialize_credits(self, value: float) -> Union[int, float]:
        return int(value) if value.is_integer() else value


class ResultPayload(_Payload):
    student_id: str = Field(min_length=1, title="Student")
    course_id: str = Field(min_length=1, title="Course")
    score: int = Field(ge=0, le=100, title="Score")
    semester: int = Field(ge=1, le=12, title="Semester")
    year: int = Field(ge=2000, le=2100, title="Year")


class GradeSheetFilter(_Payload):
    semester: Optional[int] = Field(default=None, ge=1, le=12, title="Semester")
    year: Optional[int] = Field(default=None, ge=2000, le=2100, title="Year")

    def to_params(self) -> Dict[str, str]:
        """Query parameters for the supplied filters only."""
        return {key: str(value) for key, value in self.model_dump(exclude_none=True).items()}
