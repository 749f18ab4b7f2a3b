"""PreviewService — platform projections of the stored draft."""

from __future__ import annotations

from passctl.domain.draft import PassDraft
from passctl.preview.apple import render_apple_back, render_apple_front
from passctl.preview.google import render_google
from passctl.services.base import BaseService
from passctl.services.result import ServiceResult


class PreviewService(BaseService):
    """Render the draft the way each wallet would lay it out."""

    def apple(self, *, back: bool = False) -> ServiceResult:
        op = "preview_apple_back" if back else "preview_apple"
        loaded = self._load(op)
        if isinstance(loaded, ServiceResult):
            return loaded
        if back:
            layout = render_apple_back(
                loaded,
                empty_message=self._settings.preview.back_empty_message,
            )
        else:
            layout = render_apple_front(loaded)
        return ServiceResult(
            ok=True,
            op=op,
            data=layout.model_dump(mode="json"),
            warnings=self._hidden_image_warnings(loaded),
        )

    def google(self) -> ServiceResult:
        loaded = self._load("preview_google")
        if isinstance(loaded, ServiceResult):
            return loaded
        layout = render_google(loaded, placeholder=self._settings.preview.google_placeholder)
        return ServiceResult(
            ok=True,
            op="preview_google",
            data=layout.model_dump(mode="json"),
            warnings=self._hidden_image_warnings(loaded),
        )

    def _hidden_image_warnings(self, draft: PassDraft) -> list[str]:
        result = self._validate(draft)
        return [
            issue.message for issue in result.warnings if issue.field.startswith("images.")
        ]
