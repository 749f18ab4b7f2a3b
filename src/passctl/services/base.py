"""BaseService — shared draft loading and saving for all services.

Every service receives the resolved :class:`PassSettings`. The draft
document is read from and written to a :class:`DraftStore`; services
own the conversion between stored documents and domain models.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from passctl.domain.draft import PassDraft
from passctl.domain.validation import ValidationResult, validate_draft
from passctl.infrastructure.store import DraftFileError, DraftStore
from passctl.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from passctl.config.settings import PassSettings

logger = logging.getLogger(__name__)

NO_DRAFT = ErrorCode.NO_DRAFT
INVALID_DRAFT_FILE = ErrorCode.INVALID_DRAFT_FILE


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class DraftService(BaseService):
            def add_field(self, group: str) -> ServiceResult:
                loaded = self._load("add_field")
                if isinstance(loaded, ServiceResult):
                    return loaded
                ...
    """

    def __init__(self, settings: PassSettings, store: DraftStore | None = None) -> None:
        self._settings = settings
        self._store = store or DraftStore(settings.resolved_draft_path())

    @property
    def store(self) -> DraftStore:
        return self._store

    def _fail(self, op: str, code: ErrorCode, message: str, **detail: object) -> ServiceResult:
        logger.debug("%s failed: %s", op, code)
        return ServiceResult.failure(op, code, message, **detail)

    def _load(self, op: str) -> PassDraft | ServiceResult:
        """Load the stored draft, or a failed ServiceResult explaining why not."""
        path = self._store.path
        try:
            document = self._store.read()
        except DraftFileError as exc:
            return self._fail(op, INVALID_DRAFT_FILE, str(exc), path=str(path))
        if document is None:
            return self._fail(
                op,
                NO_DRAFT,
                f"No draft at {path}. Run 'passctl new' first.",
                path=str(path),
            )
        try:
            return PassDraft.from_document(document)
        except ValidationError as exc:
            logger.debug("Stored draft failed schema validation", exc_info=True)
            return self._fail(
                op,
                INVALID_DRAFT_FILE,
                f"Draft at {path} does not match the pass schema",
                path=str(path),
                errors=exc.error_count(),
            )

    def _save(self, draft: PassDraft) -> None:
        self._store.write(draft.to_document())

    def _validate(self, draft: PassDraft) -> ValidationResult:
        return validate_draft(draft, text_limits=self._settings.text_limits())
