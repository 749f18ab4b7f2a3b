"""DraftService — editing operations on the stored draft.

Each mutation loads the draft, applies one pure transform from
:mod:`passctl.domain.mutations` or :mod:`passctl.domain.stamps`, and
writes the result only when the transform produced a new draft. The
validator runs after every mutation so the caller always gets live
feedback; a transform that declined (full group, bad index) is reported
as ``changed: false`` with a warning, never as an error.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from passctl.domain import mutations
from passctl.domain.capacity import capacity_report, get_remaining_field_count
from passctl.domain.draft import MAX_LOCATIONS, ImageRef, PassDraft, PassLocation
from passctl.domain.layouts import get_layout_definition, is_image_allowed
from passctl.domain.stamps import synthesize_stamp_progress
from passctl.domain.templates import (
    create_default_draft,
    create_draft_from_template,
    list_templates,
)
from passctl.domain.types import (
    FieldGroup,
    coerce_group,
    coerce_slot,
    coerce_style,
    supports_stamps,
)
from passctl.domain.validation import ValidationResult, is_exportable
from passctl.infrastructure.store import DraftStore
from passctl.services._helpers import now_iso
from passctl.services.base import BaseService
from passctl.services.contracts import (
    CapacityResultData,
    MutationResultData,
    TemplatesResultData,
    ValidateResultData,
    dump_validated,
)
from passctl.services.result import ErrorCode, ServiceResult

logger = logging.getLogger(__name__)

UNKNOWN_TEMPLATE = ErrorCode.UNKNOWN_TEMPLATE
DRAFT_EXISTS = ErrorCode.DRAFT_EXISTS
INVALID_DRAFT = ErrorCode.INVALID_DRAFT
STAMPS_UNSUPPORTED = ErrorCode.STAMPS_UNSUPPORTED


def _issue_dicts(result: ValidationResult) -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    return (
        [issue.model_dump() for issue in result.errors],
        [issue.model_dump() for issue in result.warnings],
    )


class DraftService(BaseService):
    """Create, edit, validate and export the draft."""

    # ------------------------------------------------------------------
    # Templates and creation
    # ------------------------------------------------------------------

    def list_templates(self) -> ServiceResult:
        items = [t.summary() for t in list_templates()]
        data = dump_validated(TemplatesResultData, {"count": len(items), "items": items})
        return ServiceResult(ok=True, op="templates", data=data)

    def new(
        self,
        template_id: str | None = None,
        *,
        style: str | None = None,
        force: bool = False,
    ) -> ServiceResult:
        """Start a draft from a template (or a blank *style*) and store it."""
        op = "new_draft"
        if self._store.exists() and not force:
            return self._fail(
                op,
                DRAFT_EXISTS,
                f"A draft already exists at {self._store.path}. Use --force to replace it.",
                path=str(self._store.path),
            )

        draft: PassDraft | None
        if style is not None:
            draft = create_default_draft(coerce_style(style))
        else:
            template_id = template_id or self._settings.draft.default_template
            draft = create_draft_from_template(template_id)
            if draft is None:
                return self._fail(
                    op,
                    UNKNOWN_TEMPLATE,
                    f"Unknown template: {template_id}",
                    template_id=template_id,
                )

        self._save(draft)
        logger.debug("Created draft from %s", draft.meta.template_id or draft.style)
        return ServiceResult(ok=True, op=op, data=self._mutation_data(draft, changed=True))

    def show(self) -> ServiceResult:
        loaded = self._load("show_draft")
        if isinstance(loaded, ServiceResult):
            return loaded
        definition = get_layout_definition(loaded.style)
        return ServiceResult(
            ok=True,
            op="show_draft",
            data={
                "path": str(self._store.path),
                "style": str(loaded.style),
                "display_name": definition.display_name,
                "draft": loaded.to_document(),
            },
        )

    # ------------------------------------------------------------------
    # Field operations
    # ------------------------------------------------------------------

    def add_field(self, group: str) -> ServiceResult:
        field_group = coerce_group(group)
        return self._apply(
            "add_field",
            lambda d: mutations.add_field(d, field_group),
            declined=f"{field_group} is full for this style; field not added",
            group=str(field_group),
        )

    def update_field(self, group: str, index: int, patch: Mapping[str, Any]) -> ServiceResult:
        field_group = coerce_group(group)
        return self._apply(
            "update_field",
            lambda d: mutations.update_field(d, field_group, index, patch),
            declined=f"No change: index {index} is out of range or the key is already used",
            group=str(field_group),
            index=index,
        )

    def remove_field(self, group: str, index: int) -> ServiceResult:
        field_group = coerce_group(group)
        return self._apply(
            "remove_field",
            lambda d: mutations.remove_field(d, field_group, index),
            declined=f"No change: index {index} is out of range for {field_group}",
            group=str(field_group),
            index=index,
        )

    def move_field(self, source: str, index: int, target: str) -> ServiceResult:
        source_group = coerce_group(source)
        target_group = coerce_group(target)
        return self._apply(
            "move_field",
            lambda d: mutations.move_field(d, source_group, index, target_group),
            declined=f"No change: {target_group} is full or index {index} is out of range",
            group=str(target_group),
            index=index,
        )

    def capacity(self) -> ServiceResult:
        loaded = self._load("capacity")
        if isinstance(loaded, ServiceResult):
            return loaded
        data = dump_validated(
            CapacityResultData,
            {"style": str(loaded.style), "groups": capacity_report(loaded)},
        )
        return ServiceResult(ok=True, op="capacity", data=data)

    # ------------------------------------------------------------------
    # Images, colors, content, barcode, style
    # ------------------------------------------------------------------

    def set_image(self, slot: str, url: str, file_name: str | None = None) -> ServiceResult:
        image_slot = coerce_slot(slot)
        ref = ImageRef(url=url, file_name=file_name or Path(url).name)
        result = self._apply(
            "set_image",
            lambda d: mutations.set_image(d, image_slot, ref),
            slot=str(image_slot),
        )
        if result.ok and not is_image_allowed(result.data["style"], image_slot):
            return result.with_warnings(f"{image_slot} is not shown for this style")
        return result

    def clear_image(self, slot: str) -> ServiceResult:
        image_slot = coerce_slot(slot)
        return self._apply(
            "clear_image",
            lambda d: mutations.set_image(d, image_slot, None),
            declined=f"No {image_slot} image was set",
            slot=str(image_slot),
        )

    def set_colors(self, patch: Mapping[str, Any]) -> ServiceResult:
        return self._apply("set_colors", lambda d: mutations.set_colors(d, patch))

    def set_content(self, patch: Mapping[str, Any]) -> ServiceResult:
        return self._apply("set_content", lambda d: mutations.set_content(d, patch))

    def set_barcode(self, patch: Mapping[str, Any]) -> ServiceResult:
        return self._apply("set_barcode", lambda d: mutations.set_barcode(d, patch))

    def change_style(self, style: str) -> ServiceResult:
        new_style = coerce_style(style)
        return self._apply(
            "change_style",
            lambda d: mutations.change_style(d, new_style),
            declined=f"Draft already uses {new_style}",
        )

    # ------------------------------------------------------------------
    # Relevance
    # ------------------------------------------------------------------

    def add_location(
        self, latitude: float, longitude: float, relevant_text: str | None = None
    ) -> ServiceResult:
        location = PassLocation(
            latitude=latitude, longitude=longitude, relevant_text=relevant_text or None
        )
        return self._apply(
            "add_location",
            lambda d: mutations.add_location(d, location),
            declined=f"Location list is full ({MAX_LOCATIONS}); location not added",
        )

    def remove_location(self, index: int) -> ServiceResult:
        return self._apply(
            "remove_location",
            lambda d: mutations.remove_location(d, index),
            declined=f"No change: no location at index {index}",
            index=index,
        )

    def set_relevance(self, patch: Mapping[str, Any]) -> ServiceResult:
        return self._apply(
            "set_relevance",
            lambda d: mutations.set_relevance(d, patch),
            declined="Relevance unchanged",
        )

    # ------------------------------------------------------------------
    # Stamps
    # ------------------------------------------------------------------

    def set_stamps(
        self,
        *,
        current: int | None = None,
        total: int | None = None,
        icon: str | None = None,
        inactive_icon: str | None = None,
        apply: bool = False,
    ) -> ServiceResult:
        """Write the stamp config (clamped); optionally synthesize fields too."""
        op = "set_stamps"
        loaded = self._load(op)
        if isinstance(loaded, ServiceResult):
            return loaded
        if not supports_stamps(loaded.style):
            return self._unsupported(op, loaded)

        def transform(draft: PassDraft) -> PassDraft:
            if draft.stamp_config is None:
                draft = draft.evolve(stamp_config=self._settings.stamp_defaults())
            updated = mutations.set_stamp_config(
                draft,
                current=current,
                total=total,
                icon=icon,
                inactive_icon=inactive_icon,
            )
            if apply:
                updated = self._synthesize(updated)
            return updated

        return self._commit(op, loaded, transform(loaded), declined="Stamp config unchanged")

    def apply_stamps(self) -> ServiceResult:
        """Write stamp text and glyph fields derived from the stamp config."""
        op = "apply_stamps"
        loaded = self._load(op)
        if isinstance(loaded, ServiceResult):
            return loaded
        if not supports_stamps(loaded.style):
            return self._unsupported(op, loaded)
        draft = loaded
        if draft.stamp_config is None:
            draft = draft.evolve(stamp_config=self._settings.stamp_defaults())
        return self._commit(
            op,
            loaded,
            self._synthesize(draft),
            declined="Stamp fields already up to date",
        )

    def _synthesize(self, draft: PassDraft) -> PassDraft:
        return synthesize_stamp_progress(
            draft,
            primary_label=self._settings.stamps.primary_label,
            progress_label=self._settings.stamps.progress_label,
        )

    def _unsupported(self, op: str, draft: PassDraft) -> ServiceResult:
        return self._fail(
            op,
            STAMPS_UNSUPPORTED,
            f"Stamp progress is only available for storeCard and eventTicket, not {draft.style}",
            style=str(draft.style),
        )

    # ------------------------------------------------------------------
    # Validation and export
    # ------------------------------------------------------------------

    def validate(self) -> ServiceResult:
        loaded = self._load("validate")
        if isinstance(loaded, ServiceResult):
            return loaded
        result = self._validate(loaded)
        errors, warnings = _issue_dicts(result)
        data = dump_validated(
            ValidateResultData,
            {
                "style": str(loaded.style),
                "valid": result.valid,
                "exportable": is_exportable(result),
                "error_count": len(errors),
                "warning_count": len(warnings),
                "errors": errors,
                "warnings": warnings,
            },
        )
        return ServiceResult(ok=True, op="validate", data=data)

    def export(self, out_path: Path) -> ServiceResult:
        """Hand the draft to packaging: write it out only if it validates.

        INVARIANT: this is the only sanctioned path from a draft to a
        platform pass; any validation error blocks it.
        """
        op = "export"
        loaded = self._load(op)
        if isinstance(loaded, ServiceResult):
            return loaded
        result = self._validate(loaded)
        if not is_exportable(result):
            errors, _ = _issue_dicts(result)
            return self._fail(
                op,
                INVALID_DRAFT,
                f"Draft has {len(errors)} validation error(s); export blocked",
                errors=errors,
            )
        DraftStore(out_path).write(
            {
                "exported_at": now_iso(),
                "draft": loaded.to_document(),
            }
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "path": str(out_path),
                "style": str(loaded.style),
                "template_id": loaded.meta.template_id,
            },
            warnings=[issue.message for issue in result.warnings],
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _apply(
        self,
        op: str,
        transform: Callable[[PassDraft], PassDraft],
        *,
        declined: str | None = None,
        **extra: Any,
    ) -> ServiceResult:
        loaded = self._load(op)
        if isinstance(loaded, ServiceResult):
            return loaded
        return self._commit(op, loaded, transform(loaded), declined=declined, **extra)

    def _commit(
        self,
        op: str,
        before: PassDraft,
        after: PassDraft,
        *,
        declined: str | None = None,
        **extra: Any,
    ) -> ServiceResult:
        changed = after is not before and after != before
        warnings: list[str] = []
        if changed:
            self._save(after)
        elif declined:
            warnings.append(declined)
        data = self._mutation_data(after, changed=changed, **extra)
        if "group" in extra:
            group = FieldGroup(extra["group"])
            data["remaining"] = get_remaining_field_count(after, group)
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def _mutation_data(self, draft: PassDraft, *, changed: bool, **extra: Any) -> dict[str, Any]:
        result = self._validate(draft)
        return dump_validated(
            MutationResultData,
            {
                "path": str(self._store.path),
                "style": str(draft.style),
                "changed": changed,
                "valid": result.valid,
                "error_count": len(result.errors),
                "warning_count": len(result.warnings),
                **extra,
            },
        )
