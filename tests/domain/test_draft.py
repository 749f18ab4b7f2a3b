"""Tests for the draft model and its serialized shape."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from passctl.domain.draft import (
    DraftMeta,
    ImageRef,
    PassContent,
    PassDraft,
    PassLocation,
    Relevance,
    StampConfig,
)
from passctl.domain.types import FieldGroup, ImageSlot, PassStyle
from tests.conftest import make_draft


class TestPassDraft:
    def test_all_groups_present(self) -> None:
        draft = PassDraft(meta=DraftMeta(style=PassStyle.COUPON))
        assert list(draft.fields) == list(FieldGroup)

    def test_frozen(self) -> None:
        draft = make_draft()
        with pytest.raises(ValidationError):
            draft.stamp_config = StampConfig()  # type: ignore[misc]

    def test_unknown_style_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PassDraft.from_document({"meta": {"style": "boardingPass"}})

    def test_mappings_are_read_only(self) -> None:
        draft = make_draft(images=[ImageSlot.LOGO])
        with pytest.raises(TypeError):
            draft.images[ImageSlot.ICON] = ImageRef(url="x")  # type: ignore[index]
        with pytest.raises(TypeError):
            draft.fields[FieldGroup.BACK] = ()  # type: ignore[index]

    def test_evolve_leaves_original_untouched(self) -> None:
        draft = make_draft(images=[ImageSlot.LOGO])
        changed = draft.evolve(images={}, content=PassContent(description="Other"))
        assert changed.images == {}
        assert draft.image(ImageSlot.LOGO) is not None
        assert draft.content.description == "Loyalty card"

    def test_evolve_validates(self) -> None:
        changed = make_draft().evolve(fields={FieldGroup.BACK: ()})
        assert list(changed.fields) == list(FieldGroup)
        with pytest.raises(TypeError):
            changed.fields[FieldGroup.BACK] = ()  # type: ignore[index]

    def test_find_field(self) -> None:
        draft = make_draft(fields={FieldGroup.BACK: [("a", "", ""), ("b", "", "")]})
        assert draft.find_field(FieldGroup.BACK, "b") == 1
        assert draft.find_field(FieldGroup.BACK, "z") is None


class TestDocument:
    def test_snake_case_keys(self) -> None:
        doc = make_draft(stamp_config=StampConfig()).to_document()
        assert doc["meta"]["style"] == "storeCard"
        assert "background_color" in doc["colors"]
        assert doc["barcode"]["format"] == "PKBarcodeFormatQR"
        assert doc["stamp_config"]["inactive_icon"] == "⚪"
        assert set(doc["fields"]) == {str(g) for g in FieldGroup}

    def test_round_trip(self) -> None:
        draft = make_draft(
            PassStyle.EVENT_TICKET,
            images=[ImageSlot.STRIP, ImageSlot.THUMBNAIL],
            fields={FieldGroup.AUXILIARY: [("a", "A", "1")]},
            stamp_config=StampConfig(current=4),
        )
        assert PassDraft.from_document(draft.to_document()) == draft

    def test_missing_groups_filled(self) -> None:
        draft = PassDraft.from_document(
            {"meta": {"style": "generic"}, "fields": {"backFields": [{"key": "x"}]}}
        )
        assert draft.group(FieldGroup.BACK)[0].key == "x"
        assert draft.group(FieldGroup.HEADER) == ()


class TestStampConfig:
    def test_defaults(self) -> None:
        config = StampConfig()
        assert (config.current, config.total) == (1, 10)
        assert config.icon == "🟢"

    def test_empty_icons_restored(self) -> None:
        config = StampConfig(icon="", inactive_icon="")
        assert config.icon == "🟢"
        assert config.inactive_icon == "⚪"

    def test_clamped_on_construction(self) -> None:
        config = StampConfig(total=0, current=7)
        assert (config.current, config.total) == (1, 1)

    @pytest.mark.parametrize("field", ["total", "current"])
    def test_null_count_rejected(self, field: str) -> None:
        with pytest.raises(ValidationError):
            StampConfig.model_validate({field: None})

    def test_null_icon_restored(self) -> None:
        assert StampConfig.model_validate({"icon": None}).icon == "🟢"


class TestRelevance:
    def test_defaults_empty(self) -> None:
        draft = make_draft()
        assert draft.relevance.is_empty
        assert draft.to_document()["relevance"] == {
            "locations": [],
            "relevant_date": None,
            "max_distance": None,
        }

    def test_round_trip(self) -> None:
        relevance = Relevance(
            locations=(PassLocation(latitude=53.55, longitude=9.99, relevant_text="Nord"),),
            relevant_date="2026-12-24T18:00:00+01:00",
            max_distance=150,
        )
        draft = make_draft().evolve(relevance=relevance)
        assert PassDraft.from_document(draft.to_document()) == draft

    def test_blank_values_unset(self) -> None:
        relevance = Relevance(relevant_date="", max_distance=0)
        assert relevance.relevant_date is None
        assert relevance.max_distance is None

    def test_older_documents_load(self) -> None:
        doc = make_draft().to_document()
        del doc["relevance"]
        assert PassDraft.from_document(doc).relevance.is_empty
