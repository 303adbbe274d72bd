import logging
import threading
from typing import Any, Callable, List, Optional, Tuple

from resultdesk.core.forms import CourseForm, FormValidationError, ResultForm, StudentForm
from resultdesk.services.backend_service import BackendService, BackendServiceError
from resultdesk.state.app_state import TABS, AppState
from resultdesk.state.request_tracker import RequestTracker, Ticket
from resultdesk.state.status import Status, StatusKind

logger = logging.getLogger(__name__)

OP_LOAD_STUDENTS = "load_students"
OP_LOAD_COURSES = "load_courses"
OP_CREATE_STUDENT = "create_student"
OP_CREATE_COURSE = "create_course"
OP_CREATE_RESULT = "create_result"
OP_LOAD_GRADE_SHEET = "load_grade_sheet"
OP_CHECK_BACKEND = "check_backend"


class ResultDeskController:
    """
    Owns the app state and every backend-facing action.

    Actions never raise: failures end up in ``state.status``. Listeners are
    called after each state change so the UI can re-render.
    """

    def __init__(
        self,
        api: BackendService,
        state: Optional[AppState] = None,
        tracker: Optional[RequestTracker] = None,
    ) -> None:
        self.api = api
        self.state = state or AppState()
        self.tracker = tracker or RequestTracker()
        self._lock = threading.RLock()
        self._listeners: List[Callable[[], None]] = []

    def subscribe(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    def _publish(self, intent: int, status: Status) -> bool:
        # Errors always reach the slot; other kinds yield to newer actions.
        with self._lock:
            if status.kind is not StatusKind.ERROR and intent < self.state.status_intent:
                logger.debug("Dropping superseded status %s", status)
                return False
            self.state.status = status
            self.state.status_intent = max(intent, self.state.status_intent)
            return True

    @staticmethod
    def _invoke(operation: str, call: Callable[[], Any]) -> Tuple[Any, Optional[str]]:
        try:
            return call(), None
        except BackendServiceError as exc:
            return None, exc.message
        except Exception as exc:
            logger.exception("Unexpected failure in %s", operation)
            return None, f"Unexpected error: {exc}"

    # Navigation

    def select_tab(self, tab: str) -> None:
        if tab not in TABS:
            raise ValueError(f"Unknown tab: {tab}")
        with self._lock:
            self.state.active_tab = tab
        self._notify()

    def set_student_search(self, text: str) -> None:
        with self._lock:
            self.state.student_search = text

    def select_student(self, student_id: Optional[str]) -> None:
        with self._lock:
            self.state.selected_student = student_id or ""

    # Read models

    def load_initial(self) -> None:
        logger.info("Loading students and courses from %s", self.api.base_url)
        self.refresh_students()
        self.refresh_courses()

    def refresh_students(self, query: Optional[str] = None) -> bool:
        with self._lock:
            if query is None:
                query = self.state.student_search
            else:
                self.state.student_search = query
        ticket = self.tracker.begin(OP_LOAD_STUDENTS)
        students, error = self._invoke(OP_LOAD_STUDENTS, lambda: self.api.list_students(query))
        return self._apply_fetch(ticket, "students", students, error)

    def refresh_courses(self) -> bool:
        ticket = self.tracker.begin(OP_LOAD_COURSES)
        courses, error = self._invoke(OP_LOAD_COURSES, self.api.list_courses)
        return self._apply_fetch(ticket, "courses", courses, error)

    def _apply_fetch(self, ticket: Ticket, attr: str, items: Any, error: Optional[str]) -> bool:
        if not self.tracker.finish(ticket):
            logger.debug("Discarding stale %s response", ticket.operation)
            return False
        if error is not None:
            self._publish(ticket.intent, Status.error(f"Could not load {attr}: {error}", ticket.operation))
        else:
            with self._lock:
                setattr(self.state, attr, items)
        self._notify()
        return error is None

    # Mutations

    def _submit(
        self,
        operation: str,
        noun: str,
        form: Any,
        send: Callable[[Any], Any],
        progress: str,
        done: str,
        reset: Callable[[], None],
    ) -> bool:
        ticket = self.tracker.try_begin(operation)
        if ticket is None:
            # Not a new action: the pending request may still report its outcome.
            self._publish(self.state.status_intent, Status.warning(f"{noun} already in progress", operation))
            self._notify()
            return False

        try:
            payload = form.to_payload()
        except FormValidationError as exc:
            self.tracker.finish(ticket)
            self._publish(ticket.intent, Status.warning(str(exc), operation))
            self._notify()
            return False

        self._publish(ticket.intent, Status.info(progress, operation))
        self._notify()

        _, error = self._invoke(operation, lambda: send(payload))
        self.tracker.finish(ticket)
        if error is not None:
            self._publish(ticket.intent, Status.error(error, operation))
            self._notify()
            return False

        logger.info("%s: %s", done, payload.model_dump())
        self._publish(ticket.intent, Status.success(done, operation))
        with self._lock:
            reset()
        self._notify()
        return True

    def create_student(self) -> bool:
        def reset() -> None:
            self.state.student_form = StudentForm()

        created = self._submit(
            OP_CREATE_STUDENT,
            "Student creation",
            self.state.student_form,
            self.api.create_student,
            "Creating student...",
            "Student created",
            reset,
        )
        if created:
            self.refresh_students()
        return created

    def create_course(self) -> bool:
        def reset() -> None:
            self.state.course_form = CourseForm()

        created = self._submit(
            OP_CREATE_COURSE,
            "Course creation",
            self.state.course_form,
            self.api.create_course,
            "Creating course...",
            "Course created",
            reset,
        )
        if created:
            self.refresh_courses()
        return created

    def create_result(self) -> bool:
        def reset() -> None:
            self.state.result_form = ResultForm()

        return self._submit(
            OP_CREATE_RESULT,
            "Result entry",
            self.state.result_form,
            self.api.create_result,
            "Adding result...",
            "Result added",
            reset,
        )

    # Grade sheet

    def fetch_grade_sheet(self) -> bool:
        with self._lock:
            student_id = self.state.selected_student
            query = self.state.grade_query
        if not student_id:
            return False

        ticket = self.tracker.begin(OP_LOAD_GRADE_SHEET)
        try:
            params = query.to_params()
        except FormValidationError as exc:
            self.tracker.finish(ticket)
            self._publish(ticket.intent, Status.warning(str(exc), OP_LOAD_GRADE_SHEET))
            self._notify()
            return False

        self._publish(ticket.intent, Status.info("Loading grade sheet...", OP_LOAD_GRADE_SHEET))
        self._notify()

        sheet, error = self._invoke(
            OP_LOAD_GRADE_SHEET,
            lambda: self.api.get_grade_sheet(student_id, params),
        )
        if not self.tracker.finish(ticket):
            logger.debug("Discarding stale grade sheet for %s", student_id)
            return False

        with self._lock:
            self.state.grade_sheet = sheet
        if error is not None:
            self._publish(ticket.intent, Status.error(f"Could not load grade sheet: {error}", OP_LOAD_GRADE_SHEET))
        else:
            self._publish(ticket.intent, Status.success("Grade sheet loaded", OP_LOAD_GRADE_SHEET))
        self._notify()
        return error is None

    def check_connectivity(self) -> bool:
        ticket = self.tracker.begin(OP_CHECK_BACKEND)
        self._publish(ticket.intent, Status.info("Checking backend...", OP_CHECK_BACKEND))
        self._notify()

        health, error = self._invoke(OP_CHECK_BACKEND, self.api.health)
        if not self.tracker.finish(ticket):
            return False
        if error is not None:
            self._publish(ticket.intent, Status.error(f"Backend unreachable: {error}", OP_CHECK_BACKEND))
        else:
            self._publish(
                ticket.intent,
                Status.success(f"Backend reachable ({health.get('status', 'ok')})", OP_CHECK_BACKEND),
            )
        self._notify()
        return error is None
