"""Student Registry Service - the registry façade.

Composes the admin set, record store, ownership index, uniqueness
indexes and token URI store into authorization-checked operations.

Every mutating call follows the same sequence:
1. Authorize the caller against the admin set
2. Check every precondition against the relevant collection(s)
3. Write the collections (all-or-nothing)
4. Emit exactly one audit event

A failed precondition raises before any collection is touched, so
every rejection leaves the registry unchanged. Lifecycle transitions
read the record, build a new record value and write it back as a
single replacement.

Read-only calls bypass authorization.

The hosting process serializes mutating calls; this service does not
lock.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

import structlog

from src.application.ports.audit_event_sink import AuditEventSink
from src.application.ports.logical_clock import LogicalClockProtocol
from src.application.services.admin_set import AdminSet
from src.application.services.base import LoggingMixin
from src.application.services.registry_stores import (
    IdentityRecordStore,
    OwnershipIndex,
    RegistryCollections,
    TokenURIStore,
    UniquenessIndex,
)
from src.application.services.student_summary import render_student_summary
from src.application.services.token_view_service import NonTransferableTokenService
from src.config.registry_config import RegistryConfig
from src.domain.errors import (
    AlreadyGraduatedError,
    EmailExistsError,
    ExternalIDExistsError,
    InvalidEmailError,
    InvalidStatusError,
    InvalidStudentError,
    InvalidYearError,
)
from src.domain.events import (
    ADMIN_ADDED_EVENT_TYPE,
    ADMIN_REMOVED_EVENT_TYPE,
    AdminChangedEventPayload,
    AuditEventPayload,
    StudentDepartmentTransferredEventPayload,
    StudentGraduatedEventPayload,
    StudentStatusUpdatedEventPayload,
    StudentYearUpdatedEventPayload,
    TransferEventPayload,
)
from src.domain.exceptions import RegistryError
from src.domain.models import (
    StudentApplication,
    StudentRecord,
    StudentStatus,
    derive_token_id,
    is_valid_year,
)
from src.domain.primitives import AtomicWriteContext


def _parse_status(status: StudentStatus | str) -> StudentStatus:
    """Resolve a status given as enum, value ("Probation") or name ("PROBATION").

    Raises:
        InvalidStatusError: If the value names no settable status.
    """
    if isinstance(status, StudentStatus):
        resolved = status
    else:
        candidates = {s.value.lower(): s for s in StudentStatus}
        resolved = candidates.get(str(status).strip().lower())
        if resolved is None:
            raise InvalidStatusError(status)
    if not resolved.is_settable():
        raise InvalidStatusError(resolved)
    return resolved


class StudentRegistryService(LoggingMixin):
    """Façade over all registry collections.

    Constructed once by the hosting process and passed to every caller.
    Independent instances share nothing, which keeps tests isolated.

    Example:
        >>> service = build_student_registry(RegistryConfig(initial_admins=("0xA",)))
        >>> token_id = service.issue("0xA", "0xHolder", application)
        >>> service.graduate("0xA", application.external_id)
    """

    def __init__(
        self,
        collections: RegistryCollections,
        config: RegistryConfig,
        clock: LogicalClockProtocol,
        audit_sink: AuditEventSink,
        initial_admins: Iterable[str] | None = None,
    ) -> None:
        """Initialize the registry and seed the admin set.

        Args:
            collections: The six ordered collections to operate on.
            config: Institutional constants.
            clock: Source of logical heights for graduation.
            audit_sink: Receives one event per successful mutation.
            initial_admins: Seed admins; defaults to config.initial_admins.

        Raises:
            ValueError: If the admin set would start empty.
        """
        self._config = config
        self._clock = clock
        self._audit_sink = audit_sink

        self._records = IdentityRecordStore(collections.records)
        self._ownership = OwnershipIndex(collections.ownership)
        self._email_index = UniquenessIndex(collections.email_index, "email")
        self._external_id_index = UniquenessIndex(
            collections.external_id_index, "external_id"
        )
        self._token_uris = TokenURIStore(collections.token_uris)
        self._admins = AdminSet(collections.admins)

        seed = tuple(initial_admins) if initial_admins is not None else config.initial_admins
        self._admins.seed(seed)

        self._tokens = NonTransferableTokenService(
            records=self._records,
            ownership=self._ownership,
            token_uris=self._token_uris,
            token_name=config.token_name,
            token_symbol=config.token_symbol,
        )
        self._init_logger()
        self._log.info("student_registry_initialized", admin_count=self._admins.count())

    @property
    def config(self) -> RegistryConfig:
        return self._config

    @property
    def tokens(self) -> NonTransferableTokenService:
        """Token read views and the disabled transfer surface."""
        return self._tokens

    # ------------------------------------------------------------------
    # Admin set
    # ------------------------------------------------------------------

    def is_admin(self, address: str) -> bool:
        return self._admins.is_admin(address)

    def list_admins(self) -> list[str]:
        return self._admins.list_admins()

    def add_admin(self, caller: str, new_admin: str) -> None:
        """Add an address to the admin set.

        Raises:
            UnauthorizedError: If caller is not an admin.
            AdminExistsError: If new_admin is already an admin.
        """
        log = self._log_operation("add_admin", caller=caller, admin=new_admin)
        try:
            self._admins.add(caller, new_admin)
        except RegistryError as exc:
            self._log_rejection(log, "add_admin", exc)
            raise
        self._emit(
            AdminChangedEventPayload(
                event_type=ADMIN_ADDED_EVENT_TYPE, actor=caller, admin=new_admin
            )
        )
        log.info("admin_added", admin_count=self._admins.count())

    def remove_admin(self, caller: str, target: str) -> None:
        """Remove an address from the admin set.

        Raises:
            UnauthorizedError: If caller is not an admin.
            LastAdminProtectedError: If only one admin remains.
            SelfRemovalError: If caller equals target.
            AdminNotFoundError: If target is not an admin.
        """
        log = self._log_operation("remove_admin", caller=caller, admin=target)
        try:
            self._admins.remove(caller, target)
        except RegistryError as exc:
            self._log_rejection(log, "remove_admin", exc)
            raise
        self._emit(
            AdminChangedEventPayload(
                event_type=ADMIN_REMOVED_EVENT_TYPE, actor=caller, admin=target
            )
        )
        log.info("admin_removed", admin_count=self._admins.count())

    # ------------------------------------------------------------------
    # Issuance
    # ------------------------------------------------------------------

    def issue(self, caller: str, holder: str, application: StudentApplication) -> str:
        """Issue a student ID token to a holder.

        Any image_url on the application is discarded; the record gets
        the configured default image.

        Args:
            caller: Admin performing the issuance.
            holder: Address that will hold the token.
            application: Student data.

        Returns:
            The token identifier derived from application.external_id.

        Raises:
            UnauthorizedError: If caller is not an admin.
            InvalidEmailError: If the email lacks the institutional suffix.
            EmailExistsError: If the email was already used.
            ExternalIDExistsError: If the external ID was already used.
            InvalidYearError: If the year is not a positive integer.
        """
        log = self._log_operation(
            "issue", caller=caller, holder=holder, external_id=application.external_id
        )
        try:
            token_id = self._check_issue(caller, application)
        except RegistryError as exc:
            self._log_rejection(log, "issue", exc)
            raise

        record = StudentRecord.from_application(
            application, image_url=self._config.default_image_url
        )
        email = record.email
        external_id = record.external_id

        with AtomicWriteContext("issue") as ctx:
            previous = self._records.put(record)
            ctx.add_rollback(lambda: self._records.restore(token_id, previous))
            self._ownership.assign(token_id, holder)
            ctx.add_rollback(lambda: self._ownership.release(token_id))
            self._email_index.claim(email, token_id)
            ctx.add_rollback(lambda: self._email_index.release(email))
            self._external_id_index.claim(external_id, token_id)
            ctx.add_rollback(lambda: self._external_id_index.release(external_id))
            self._token_uris.set(token_id, record.image_url)
            ctx.add_rollback(lambda: self._token_uris.discard(token_id))

        self._emit(TransferEventPayload(to_address=holder, token_id=token_id))
        log.info("student_issued", token_id=token_id)
        return token_id

    def _check_issue(self, caller: str, application: StudentApplication) -> str:
        self._admins.require_admin(caller, "issue")
        if not application.email.endswith(self._config.email_domain):
            raise InvalidEmailError(application.email, self._config.email_domain)
        existing = self._email_index.token_for(application.email)
        if existing is not None:
            raise EmailExistsError(application.email, existing)
        if self._external_id_index.contains(application.external_id):
            raise ExternalIDExistsError(application.external_id)
        if not is_valid_year(application.year):
            raise InvalidYearError(application.year)
        return derive_token_id(application.external_id)

    # ------------------------------------------------------------------
    # Lifecycle transitions
    # ------------------------------------------------------------------

    def update_year(self, caller: str, external_id: str, year: int) -> StudentRecord:
        """Set the student's year of study.

        Raises:
            UnauthorizedError, InvalidStudentError, AlreadyGraduatedError,
            InvalidYearError
        """
        log = self._log_operation("update_year", caller=caller, external_id=external_id)
        _, updated = self._transition(
            caller, external_id, "update_year", log, lambda r: r.with_year(year)
        )
        self._emit(
            StudentYearUpdatedEventPayload(
                actor=caller, token_id=updated.token_id, year=updated.year
            )
        )
        log.info("student_year_updated", year=updated.year)
        return updated

    def set_status(
        self,
        caller: str,
        external_id: str,
        status: StudentStatus | str,
        reason: str = "",
    ) -> StudentRecord:
        """Move a student between ACTIVE and PROBATION.

        Args:
            caller: Admin performing the change.
            external_id: Student's external identifier.
            status: ACTIVE or PROBATION (enum, value or name).
            reason: Probation reason; dropped when moving to ACTIVE.

        Raises:
            UnauthorizedError, InvalidStudentError, AlreadyGraduatedError,
            InvalidStatusError
        """
        log = self._log_operation("set_status", caller=caller, external_id=external_id)
        _, updated = self._transition(
            caller,
            external_id,
            "set_status",
            log,
            lambda r: r.with_status(_parse_status(status), reason),
        )
        self._emit(
            StudentStatusUpdatedEventPayload(
                actor=caller,
                token_id=updated.token_id,
                status=updated.status.value,
                reason=updated.probation_reason or "",
            )
        )
        log.info("student_status_updated", status=updated.status.value)
        return updated

    def transfer_department(
        self, caller: str, external_id: str, department: str
    ) -> StudentRecord:
        """Move a student to another department.

        Raises:
            UnauthorizedError, InvalidStudentError, AlreadyGraduatedError
        """
        log = self._log_operation(
            "transfer_department", caller=caller, external_id=external_id
        )
        current, updated = self._transition(
            caller,
            external_id,
            "transfer_department",
            log,
            lambda r: r.with_department(department),
        )
        self._emit(
            StudentDepartmentTransferredEventPayload(
                actor=caller,
                token_id=updated.token_id,
                from_department=current.department,
                to_department=updated.department,
            )
        )
        log.info(
            "student_department_transferred",
            from_department=current.department,
            to_department=updated.department,
        )
        return updated

    def graduate(self, caller: str, external_id: str) -> StudentRecord:
        """Graduate a final-year student. GRADUATED is terminal.

        Ownership of the token does not change.

        Raises:
            UnauthorizedError, InvalidStudentError, AlreadyGraduatedError,
            NotFinalYearError
        """
        log = self._log_operation("graduate", caller=caller, external_id=external_id)
        _, updated = self._transition(
            caller,
            external_id,
            "graduate",
            log,
            lambda r: r.graduated(self._clock.current_height(), self._config.final_year),
        )
        graduated_at = updated.graduated_at if updated.graduated_at is not None else 0
        self._emit(
            StudentGraduatedEventPayload(
                actor=caller, token_id=updated.token_id, graduated_at=graduated_at
            )
        )
        log.info("student_graduated", graduated_at=graduated_at)
        return updated

    def _transition(
        self,
        caller: str,
        external_id: str,
        operation: str,
        log: structlog.BoundLogger,
        change: Callable[[StudentRecord], StudentRecord],
    ) -> tuple[StudentRecord, StudentRecord]:
        """Authorize, read, validate and replace one record.

        Returns:
            (previous record, stored record).
        """
        try:
            self._admins.require_admin(caller, operation)
            current = self.get_record(external_id)
            if current.is_graduated:
                raise AlreadyGraduatedError(external_id, current.graduated_at)
            updated = change(current)
        except RegistryError as exc:
            self._log_rejection(log, operation, exc)
            raise
        self._records.put(updated)
        return current, updated

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_record(self, external_id: str) -> StudentRecord:
        """Fetch a student record.

        A single record fetch is the unit of read consistency.

        Raises:
            InvalidStudentError: If no record exists for external_id.
        """
        record = self._records.get(derive_token_id(external_id))
        if record is None:
            raise InvalidStudentError(external_id)
        return record

    def is_enrolled(self, address: str) -> bool:
        """True iff the address holds at least one token."""
        return self._tokens.balance_of(address) > 0

    def list_records(self) -> list[StudentRecord]:
        """All records in token identifier order."""
        return list(self._records.records())

    def list_records_by_enrollment(self) -> list[StudentRecord]:
        """All records, stably sorted by enrollment key (oldest first)."""
        return sorted(self._records.records(), key=lambda record: record.enrolled_at)

    def render_summary(self, external_id: str) -> str:
        """Render a human-readable summary of a student record.

        Raises:
            InvalidStudentError: If no record exists for external_id.
        """
        record = self.get_record(external_id)
        return render_student_summary(record, holder=self._ownership.owner_of(record.token_id))

    # ------------------------------------------------------------------
    # Audit
    # ------------------------------------------------------------------

    def _emit(self, payload: AuditEventPayload) -> None:
        self._audit_sink.emit(payload.event_type, payload.to_fields())
