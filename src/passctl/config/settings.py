"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``PASSCTL_*`` prefix
  3. TOML file    — ``passctl.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`passctl.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from passctl.config.discovery import find_config
from passctl.config.models import DraftConfig, PreviewConfig, StampsConfig, ValidationConfig
from passctl.domain.draft import StampConfig
from passctl.domain.validation import TextLengthLimits


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``passctl.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class PassSettings(BaseSettings):
    """Unified settings for the passctl CLI.

    Merges CLI flags, environment variables, TOML config sections,
    and code-baked defaults into a single frozen object.

    Attributes:
        project_root: Directory holding ``passctl.toml`` (or CWD if none).
        config_path: Resolved config file, or None when running on defaults.
        draft_path: Explicit ``--draft`` override; falls back to ``[draft] path``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PASSCTL_",
        "env_nested_delimiter": "__",
    }

    # --- Resolved paths (not in TOML) ---
    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None
    draft_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    draft: DraftConfig = Field(default_factory=DraftConfig)
    stamps: StampsConfig = Field(default_factory=StampsConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    preview: PreviewConfig = Field(default_factory=PreviewConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        draft_path: str | None = None,
        **cli_flags: Any,
    ) -> PassSettings:
        """Construct settings from CLI invocation.

        Discovers ``passctl.toml`` via walk-up (or explicit *config_path*),
        resolves *project_root* from the config file's parent directory,
        and merges CLI flags as highest-priority overrides.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(project_root)

        resolved_root = project_root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        extra: dict[str, Any] = {}
        if draft_path:
            extra["draft_path"] = Path(draft_path)

        _tls.toml_path = toml_path
        try:
            return cls(
                project_root=resolved_root,
                config_path=toml_path,
                **extra,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None

    # --- Derived views ---

    def resolved_draft_path(self) -> Path:
        """Draft file location: ``--draft`` if given, else ``[draft] path`` under the root."""
        if self.draft_path is not None:
            return self.draft_path
        path = Path(self.draft.path)
        return path if path.is_absolute() else self.project_root / path

    def stamp_defaults(self) -> StampConfig:
        return StampConfig(
            icon=self.stamps.icon,
            inactive_icon=self.stamps.inactive_icon,
            total=self.stamps.total,
            current=self.stamps.current,
        )

    def text_limits(self) -> TextLengthLimits:
        return TextLengthLimits(
            header_value=self.validation.header_value_max,
            primary_value=self.validation.primary_value_max,
            logo_text=self.validation.logo_text_max,
            enabled=self.validation.text_length_warnings,
        )
