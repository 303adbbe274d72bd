from dataclasses import dataclass, field
from typing import List, Optional

from resultdesk.core.forms import CourseForm, GradeQuery, ResultForm, StudentForm
from resultdesk.core.models import Course, GradeSheet, Student
from resultdesk.state.status import Status

TAB_STUDENTS = "Students"
TAB_COURSES = "Courses"
TAB_RESULTS = "Results"
TAB_GRADE_SHEET = "Grade Sheet"
TAB_CONNECTIVITY = "Connectivity Test"

TABS = (TAB_STUDENTS, TAB_COURSES, TAB_RESULTS, TAB_GRADE_SHEET, TAB_CONNECTIVITY)


@dataclass
class AppState:
    active_tab: str = TAB_STUDENTS

    students: List[Student] = field(default_factory=list)
    courses: List[Course] = field(default_factory=list)
    student_search: str = ""

    student_form: StudentForm = field(default_factory=StudentForm)
    course_form: CourseForm = field(default_factory=CourseForm)
    result_form: ResultForm = field(default_factory=ResultForm)

    selected_student: str = ""
    grade_query: GradeQuery = field(default_factory=GradeQuery)
    grade_sheet: Optional[GradeSheet] = None

    status: Status = field(default_factory=Status)
    # Global ticket number of the action that last wrote ``status``.
    status_intent: int = 0
