"""
Draft Controller - the add/edit form state machine.

States:
- CLOSED: no form open (initial and resting state)
- CREATING: form open for a new student
- EDITING: form open on an existing student, `editing_id` names it

Transitions:
    CLOSED   --open_for_create()-->    CREATING   (empty draft)
    CLOSED   --open_for_edit(id)-->    EDITING    (draft loaded from record)
    open     --set_field(f, v)-->      same state (draft replaced, no validation)
    open     --submit() rejected-->    same state (error attached to draft)
    open     --submit() accepted-->    CLOSED     (store written once)
    open     --cancel()-->             CLOSED     (store untouched)

The controller is the only writer of the store. delete() sits outside
the state machine and may be called in any state.
"""

from enum import Enum
from typing import Optional

from roster.errors import DraftStateError, DraftValidationError, UnknownFieldError
from roster.schemas import Draft, StudentFields, StudentRecord
from roster.services.store import StudentStore, new_student_id
from roster.services.validation import REQUIRED_FIELDS, validate_fields
from roster.logging_config import get_logger, log_with_context

logger = get_logger("draft")

EDITABLE_FIELDS = REQUIRED_FIELDS


class DraftMode(str, Enum):
    CLOSED = "closed"
    CREATING = "creating"
    EDITING = "editing"


class DraftController:
    """Owns the single in-flight Draft and commits it into the store."""

    def __init__(self, store: StudentStore):
        self._store = store
        self._draft: Optional[Draft] = None
        self._editing_id: Optional[str] = None

    # ── State ────────────────────────────────────────────────

    @property
    def mode(self) -> DraftMode:
        if self._draft is None:
            return DraftMode.CLOSED
        if self._editing_id is None:
            return DraftMode.CREATING
        return DraftMode.EDITING

    @property
    def draft(self) -> Optional[Draft]:
        return self._draft

    @property
    def editing_id(self) -> Optional[str]:
        return self._editing_id

    @property
    def is_open(self) -> bool:
        return self._draft is not None

    @property
    def title(self) -> Optional[str]:
        """Form title shown while a draft is open."""
        return {
            DraftMode.CREATING: "Add Student",
            DraftMode.EDITING: "Edit Student",
        }.get(self.mode)

    @property
    def action_label(self) -> Optional[str]:
        return {
            DraftMode.CREATING: "Add",
            DraftMode.EDITING: "Save",
        }.get(self.mode)

    # ── Transitions ──────────────────────────────────────────

    def open_for_create(self) -> Draft:
        self._require_closed("open_for_create")
        self._draft = Draft()
        self._editing_id = None
        log_with_context(logger, "DEBUG", "Draft opened for create")
        return self._draft

    def open_for_edit(self, student_id: str) -> Optional[Draft]:
        """
        Load an existing record into a new draft.

        Returns None and stays CLOSED when no record has this id.
        """
        self._require_closed("open_for_edit")
        record = self._store.get(student_id)
        if record is None:
            log_with_context(logger, "WARNING", "Edit requested for unknown student {}".format(student_id),
                             context={"student_id": student_id})
            return None

        self._draft = Draft.from_record(record)
        self._editing_id = student_id
        log_with_context(logger, "DEBUG", "Draft opened for edit",
                         context={"student_id": student_id})
        return self._draft

    def set_field(self, field: str, value: str) -> Draft:
        draft = self._require_open("set_field")
        if field not in EDITABLE_FIELDS:
            raise UnknownFieldError(field)

        self._draft = draft.model_copy(update={field: value})
        return self._draft

    def submit(self) -> Optional[StudentRecord]:
        """
        Validate the draft and commit it.

        Returns:
            The stored record on success (draft closed), or None when the
            draft was rejected; the rejection message is then on `draft.error`.

        Raises:
            RecordNotFound: the record being edited is gone from the store
        """
        draft = self._require_open("submit")
        mode = self.mode

        try:
            validate_fields(draft)
        except DraftValidationError as exc:
            self._draft = draft.model_copy(update={"error": exc.message, "error_kind": exc.kind})
            log_with_context(logger, "INFO", "Draft rejected: {}".format(exc.message),
                             context={"mode": mode.value, "student_id": self._editing_id},
                             extra_data={"error_kind": exc.kind.value})
            return None

        fields = StudentFields(name=draft.name, email=draft.email, id_number=draft.id_number)
        if mode is DraftMode.CREATING:
            record = self._store.add(StudentRecord(id=new_student_id(), **fields.model_dump()))
        else:
            record = self._store.update(self._editing_id, fields)

        log_with_context(logger, "INFO", "Draft committed",
                         context={"mode": mode.value, "student_id": record.id})
        self._close()
        return record

    def cancel(self):
        """Discard the draft and any error. No-op when already closed."""
        if self.is_open:
            log_with_context(logger, "DEBUG", "Draft cancelled",
                             context={"mode": self.mode.value, "student_id": self._editing_id})
        self._close()

    def delete(self, student_id: str) -> bool:
        return self._store.remove(student_id)

    # ── Helpers ──────────────────────────────────────────────

    def _close(self):
        self._draft = None
        self._editing_id = None

    def _require_open(self, operation: str) -> Draft:
        if self._draft is None:
            raise DraftStateError("{} requires an open draft".format(operation))
        return self._draft

    def _require_closed(self, operation: str):
        if self._draft is not None:
            raise DraftStateError("{} while a draft is already open ({})".format(operation, self.mode.value))
