"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, passctl.toml only contains
overrides. A fresh project needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel

from passctl.domain.draft import DEFAULT_INACTIVE_ICON, DEFAULT_STAMP_ICON
from passctl.domain.stamps import DEFAULT_PRIMARY_LABEL, DEFAULT_PROGRESS_LABEL

# --- passctl.toml sections ---


class DraftConfig(BaseModel):
    """[draft] section."""

    model_config = {"frozen": True}

    path: str = "pass-draft.json"
    default_template: str = "stempelkarte"


class StampsConfig(BaseModel):
    """[stamps] section — defaults for new stamp configs and synthesized labels."""

    model_config = {"frozen": True}

    icon: str = DEFAULT_STAMP_ICON
    inactive_icon: str = DEFAULT_INACTIVE_ICON
    total: int = 10
    current: int = 1
    primary_label: str = DEFAULT_PRIMARY_LABEL
    progress_label: str = DEFAULT_PROGRESS_LABEL


class ValidationConfig(BaseModel):
    """[validation] section."""

    model_config = {"frozen": True}

    text_length_warnings: bool = True
    header_value_max: int = 10
    primary_value_max: int = 20
    logo_text_max: int = 20


class PreviewConfig(BaseModel):
    """[preview] section."""

    model_config = {"frozen": True}

    back_empty_message: str = "No back-side information"
    google_placeholder: str = "No banner image"

