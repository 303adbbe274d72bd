import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests
from pydantic import BaseModel, ValidationError
from requests import RequestException

from resultdesk.config.settings import settings
from resultdesk.core.models import Course, GradeSheet, Student

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Failed"


class BackendServiceError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_detail(res: requests.Response) -> str:
    try:
        data = res.json()
    except ValueError:
        return GENERIC_FAILURE
    if not isinstance(data, dict):
        return GENERIC_FAILURE

    detail = data.get("detail")
    if isinstance(detail, str) and detail:
        return detail
    # FastAPI validation errors: [{"loc": [...], "msg": "...", "type": "..."}]
    if isinstance(detail, list):
        messages = [str(item.get("msg")) for item in detail if isinstance(item, dict) and item.get("msg")]
        if messages:
            return "; ".join(messages)
    return GENERIC_FAILURE


class BackendService:
    STUDENTS_PATH = "/api/students"
    COURSES_PATH = "/api/courses"
    RESULTS_PATH = "/api/results"
    GRADESHEET_PATH = "/api/gradesheet/{student_id}"
    HEALTH_PATH = "/health"

    def __init__(
        self,
        base_url: str,
        timeout: float = 15.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not base_url:
            raise BackendServiceError("Missing RESULTDESK_BACKEND_URL in environment")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls) -> "BackendService":
        return cls(settings.backend_url, timeout=settings.request_timeout)

    def list_students(self, query: str = "") -> List[Student]:
        params = {"q": query} if query else None
        data = self._request("GET", self.STUDENTS_PATH, params=params)
        return self._parse_list(Student, data)

    def list_courses(self) -> List[Course]:
        data = self._request("GET", self.COURSES_PATH)
        return self._parse_list(Course, data)

    def create_student(self, payload: BaseModel) -> Any:
        return self._request("POST", self.STUDENTS_PATH, payload=payload.model_dump())

    def create_course(self, payload: BaseModel) -> Any:
        return self._request("POST", self.COURSES_PATH, payload=payload.model_dump())

    def create_result(self, payload: BaseModel) -> Any:
        return self._request("POST", self.RESULTS_PATH, payload=payload.model_dump())

    def get_grade_sheet(self, student_id: str, params: Optional[Dict[str, str]] = None) -> GradeSheet:
        path = self.GRADESHEET_PATH.format(student_id=quote(student_id, safe=""))
        data = self._request("GET", path, params=params or None)
        try:
            return GradeSheet.model_validate(data)
        except ValidationError as exc:
            logger.warning("Unexpected grade sheet payload: %s", exc)
            raise BackendServiceError("Invalid response from backend") from exc

    def health(self) -> Dict[str, Any]:
        data = self._request("GET", self.HEALTH_PATH)
        return data if isinstance(data, dict) else {"status": data}

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, str]] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s params=%s", method, url, params)
        try:
            res = self.session.request(method, url, params=params, json=payload, timeout=self.timeout)
        except RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise BackendServiceError(f"Could not reach backend: {exc}") from exc

        if not res.ok:
            detail = _error_detail(res)
            logger.warning("%s %s returned %s: %s", method, url, res.status_code, detail)
            raise BackendServiceError(detail, status_code=res.status_code)

        if not res.content:
            return None
        try:
            return res.json()
        except ValueError as exc:
            raise BackendServiceError("Invalid response from backend", status_code=res.status_code) from exc

    @staticmethod
    def _parse_list(model, data: Any) -> List:
        if not isinstance(data, list):
            raise BackendServiceError("Invalid response from backend")
        items = []
        for item in data:
            try:
                items.append(model.model_validate(item))
            except ValidationError as exc:
                logger.warning("Skipping malformed %s record: %s", model.__name__, exc)
        return items
