"""Tests for the field-capacity guard."""

from __future__ import annotations

import pytest

from passctl.domain.capacity import (
    UNLIMITED_CAPACITY,
    can_add_field,
    capacity_report,
    get_remaining_field_count,
)
from passctl.domain.errors import UnknownFieldGroupError
from passctl.domain.types import FieldGroup, PassStyle
from tests.conftest import make_draft


class TestCanAddField:
    def test_empty_group(self) -> None:
        assert can_add_field(make_draft(), FieldGroup.HEADER)

    def test_full_primary(self) -> None:
        draft = make_draft(fields={FieldGroup.PRIMARY: [("a", "A", "1")]})
        assert not can_add_field(draft, FieldGroup.PRIMARY)

    def test_back_unlimited(self) -> None:
        items = [(f"b{i}", "", "") for i in range(50)]
        draft = make_draft(fields={FieldGroup.BACK: items})
        assert can_add_field(draft, FieldGroup.BACK)

    def test_accepts_group_name(self) -> None:
        assert can_add_field(make_draft(), "secondaryFields")

    def test_unknown_group(self) -> None:
        with pytest.raises(UnknownFieldGroupError):
            can_add_field(make_draft(), "footerFields")


class TestRemaining:
    def test_counts_down(self) -> None:
        draft = make_draft(fields={FieldGroup.SECONDARY: [("a", "", ""), ("b", "", "")]})
        assert get_remaining_field_count(draft, FieldGroup.SECONDARY) == 2

    def test_never_negative(self) -> None:
        items = [(f"h{i}", "", "") for i in range(5)]
        draft = make_draft(fields={FieldGroup.HEADER: items})
        assert get_remaining_field_count(draft, FieldGroup.HEADER) == 0
        assert not can_add_field(draft, FieldGroup.HEADER)

    def test_unlimited(self) -> None:
        assert get_remaining_field_count(make_draft(), FieldGroup.BACK) == UNLIMITED_CAPACITY

    @pytest.mark.parametrize("style", list(PassStyle))
    def test_guard_agrees_with_remaining(self, style: PassStyle) -> None:
        draft = make_draft(style, fields={FieldGroup.AUXILIARY: [("a", "", "")] * 1})
        for group in FieldGroup:
            remaining = get_remaining_field_count(draft, group)
            assert can_add_field(draft, group) == (remaining == UNLIMITED_CAPACITY or remaining > 0)


class TestCapacityReport:
    def test_rows_in_group_order(self) -> None:
        rows = capacity_report(make_draft(fields={FieldGroup.PRIMARY: [("p", "", "")]}))
        assert [row["group"] for row in rows] == [str(g) for g in FieldGroup]
        primary = rows[1]
        assert primary == {
            "group": "primaryFields",
            "count": 1,
            "limit": 1,
            "remaining": 0,
            "can_add": False,
        }
        assert rows[-1]["limit"] == "unlimited"
