"""Tests for the exception taxonomy.

Validates:
- TrueSizeError attributes and ``to_error_dict()`` keys
- Category classification and retry semantics
- Every domain exception is a TrueSizeError with a stable code
"""

from __future__ import annotations

from typing import ClassVar

from truesize.catalog.loader import CatalogLoadError
from truesize.core.config import ConfigValidationError
from truesize.core.exceptions import (
    ContractError,
    EmptyGeometryError,
    InvalidReferencePointError,
    MalformedGeometryError,
    PermanentError,
    TrueSizeError,
    UnsupportedGeometryKind,
    ValidationError,
)


class TestTrueSizeErrorBase:
    def test_default_attributes(self) -> None:
        err = TrueSizeError("boom")
        assert err.message == "boom"
        assert err.stage == ""
        assert err.code == ""
        assert err.retryable is False

    def test_str_is_message(self) -> None:
        assert str(TrueSizeError("human-readable error")) == "human-readable error"

    def test_to_error_dict(self) -> None:
        err = TrueSizeError("x", stage="s", code="C")
        assert err.to_error_dict() == {
            "category": "permanent",
            "code": "C",
            "stage": "s",
            "message": "x",
            "retryable": False,
        }

    def test_dynamic_category_from_retryable(self) -> None:
        assert TrueSizeError("x", retryable=True).category == "transient"
        assert TrueSizeError("x").category == "permanent"


class TestCategoryBases:
    def test_validation(self) -> None:
        err = ValidationError("bad input")
        assert err.retryable is False
        assert err.category == "validation"

    def test_permanent(self) -> None:
        assert PermanentError("gone").category == "permanent"

    def test_contract(self) -> None:
        assert ContractError("drift").category == "contract"


class TestDomainExceptions:
    CASES: ClassVar[list[tuple[TrueSizeError, str, str, str]]] = [
        (UnsupportedGeometryKind("Point"), "validation", "geometry", "UNSUPPORTED_GEOMETRY_KIND"),
        (EmptyGeometryError("empty"), "validation", "centroid", "EMPTY_GEOMETRY"),
        (MalformedGeometryError("bad"), "contract", "geometry", "MALFORMED_GEOMETRY"),
        (InvalidReferencePointError("nan"), "validation", "geometry", "INVALID_REFERENCE_POINT"),
        (CatalogLoadError("io"), "permanent", "catalog", "CATALOG_LOAD_FAILED"),
        (ConfigValidationError("K", 1, "nope"), "permanent", "config", "CONFIG_VALIDATION_FAILED"),
    ]

    def test_all_are_truesize_errors(self) -> None:
        for err, _, _, _ in self.CASES:
            assert isinstance(err, TrueSizeError)
            assert err.retryable is False

    def test_categories_stages_codes(self) -> None:
        for err, category, stage, code in self.CASES:
            assert err.category == category, type(err).__name__
            assert err.stage == stage, type(err).__name__
            assert err.code == code, type(err).__name__

    def test_unsupported_kind_message(self) -> None:
        err = UnsupportedGeometryKind("GeometryCollection")
        assert err.kind == "GeometryCollection"
        assert "GeometryCollection" in err.message
