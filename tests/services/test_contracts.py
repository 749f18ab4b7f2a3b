"""Tests for service payload contracts."""

import pytest
from pydantic import ValidationError

from passctl.services.contracts import (
    CapacityResultData,
    MutationResultData,
    ValidateResultData,
    dump_validated,
)


class TestDumpValidated:
    def test_mutation_keeps_extras(self) -> None:
        data = dump_validated(
            MutationResultData,
            {
                "path": "pass-draft.json",
                "style": "coupon",
                "changed": True,
                "valid": False,
                "error_count": 1,
                "warning_count": 0,
                "group": "headerFields",
            },
        )
        assert data["group"] == "headerFields"

    def test_missing_key_fails(self) -> None:
        with pytest.raises(ValidationError):
            dump_validated(MutationResultData, {"path": "x", "style": "coupon"})

    def test_capacity_accepts_unlimited(self) -> None:
        row = {
            "group": "backFields",
            "count": 2,
            "limit": "unlimited",
            "remaining": "unlimited",
            "can_add": True,
        }
        data = dump_validated(CapacityResultData, {"style": "generic", "groups": [row]})
        assert data["groups"][0]["remaining"] == "unlimited"

    def test_issue_severity_is_closed(self) -> None:
        issue = {"field": "x", "code": "required", "message": "m", "severity": "fatal"}
        with pytest.raises(ValidationError):
            dump_validated(
                ValidateResultData,
                {
                    "style": "coupon",
                    "valid": False,
                    "exportable": False,
                    "error_count": 1,
                    "warning_count": 0,
                    "errors": [issue],
                    "warnings": [],
                },
            )
