"""Shared pytest fixtures and test helpers for passctl tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from passctl.config.settings import PassSettings
from passctl.domain.draft import (
    BarcodeConfig,
    DraftMeta,
    ImageRef,
    PassContent,
    PassDraft,
    PassField,
    StampConfig,
)
from passctl.domain.types import FieldGroup, ImageSlot, PassStyle
from passctl.services.draft import DraftService
from passctl.services.preview import PreviewService


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's PASSCTL_* environment out of the tests."""
    names = ("PASSCTL_CONFIG", "PASSCTL_DRAFT_PATH", "PASSCTL_DRAFT__PATH", "PASSCTL_PROJECT_ROOT")
    for name in names:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Empty project directory; drafts land in ``pass-draft.json`` here."""
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> PassSettings:
    return PassSettings.from_cli(project_root=project_root)


@pytest.fixture
def draft_service(settings: PassSettings) -> DraftService:
    return DraftService(settings)


@pytest.fixture
def preview_service(settings: PassSettings) -> PreviewService:
    return PreviewService(settings)


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp project so the CLI reads and writes there.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.chdir(project_root)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_draft(
    style: PassStyle = PassStyle.STORE_CARD,
    *,
    fields: dict[FieldGroup, list[tuple[str, str, str]]] | None = None,
    images: list[ImageSlot] | None = None,
    description: str = "Loyalty card",
    message: str = "CUST-0001",
    stamp_config: StampConfig | None = None,
    **content: Any,
) -> PassDraft:
    """Build a draft from compact ``(key, label, value)`` field tuples."""
    groups = {
        group: tuple(PassField(key=k, label=lbl, value=v) for k, lbl, v in items)
        for group, items in (fields or {}).items()
    }
    return PassDraft(
        meta=DraftMeta(style=style),
        content=PassContent(description=description, **content),
        images={slot: ImageRef(url=f"https://cdn.test/{slot}.png") for slot in images or []},
        fields=groups,
        barcode=BarcodeConfig(message=message),
        stamp_config=stamp_config,
    )


def keys(draft: PassDraft, group: FieldGroup) -> list[str]:
    return [item.key for item in draft.group(group)]
