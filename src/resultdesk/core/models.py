from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Number = Union[int, float]


class _BackendRecord(BaseModel):
    # Backend documents carry their key as "_id".
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(alias="_id")


class Student(_BackendRecord):
    name: str
    email: Optional[str] = None
    roll_number: Optional[str] = None
    department: Optional[str] = None
    semester: Optional[int] = None
    year: Optional[int] = None

    @property
    def label(self) -> str:
        return f"{self.name} - {self.roll_number or '-'}"


class Course(_BackendRecord):
    code: str
    title: Optional[str] = None
    credits: Optional[Number] = None

    @property
    def label(self) -> str:
        return f"{self.code} - {self.title or '-'}"


class GradeSheetRow(BaseModel):
    model_config = ConfigDict(extra="ignore")

    course_id: str
    score: Optional[Number] = None
    grade: Optional[str] = None
    grade_point: Optional[Number] = None
    semester: Optional[int] = None
    year: Optional[int] = None


class GradeSheet(BaseModel):
    model_config = ConfigDict(extra="ignore")

    sgpa: Optional[Number] = None
    results: List[GradeSheetRow] = Field(default_factory=list)

    @property
    def sgpa_label(self) -> str:
        return "-" if self.sgpa is None else str(self.sgpa)
