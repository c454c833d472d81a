"""Unified exception taxonomy.

Every domain exception inherits from ``TrueSizeError`` and carries
structured context fields for consistent reporting by the calling map
layer.

Taxonomy categories
-------------------
- ``ValidationError``   — unsupported or empty input, never retryable.
- ``PermanentError``    — unrecoverable failures (unreadable data files).
- ``ContractError``     — structurally broken GeoJSON payloads.

All operations in this package are deterministic, so no category is
retryable by default.  Every exception exposes ``to_error_dict()`` for a
stable structured error payload.
"""

from __future__ import annotations


class TrueSizeError(Exception):
    """Base exception for all true-size errors.

    Attributes:
        message: Human-readable error description.
        stage: Component where the error occurred
            (e.g. ``"geometry"``, ``"centroid"``, ``"catalog"``).
        code: Machine-readable error code (e.g. ``"EMPTY_GEOMETRY"``).
        retryable: Whether repeating the call could succeed.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool = False,
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = retryable
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ContractError):
            return "contract"
        if isinstance(self, ValidationError):
            return "validation"
        if isinstance(self, PermanentError):
            return "permanent"
        return "transient" if self.retryable else "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(TrueSizeError):
    """Input validation failure. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class PermanentError(TrueSizeError):
    """Unrecoverable failure. Not retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class ContractError(TrueSizeError):
    """Payload does not follow the GeoJSON geometry contract. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Geometry errors
# ---------------------------------------------------------------------------


class UnsupportedGeometryKind(ValidationError):
    """Raised for any geometry type other than Polygon or MultiPolygon.

    Attributes:
        kind: The offending geometry type name (e.g. ``"Point"``).
    """

    default_stage = "geometry"
    default_code = "UNSUPPORTED_GEOMETRY_KIND"

    def __init__(self, kind: str, **kwargs: object) -> None:
        self.kind = kind
        super().__init__(
            f"Unsupported geometry kind {kind!r}: only Polygon and MultiPolygon can be relocated",
            **kwargs,
        )


class EmptyGeometryError(ValidationError):
    """Raised when a centroid is requested for a geometry with no vertices."""

    default_stage = "centroid"
    default_code = "EMPTY_GEOMETRY"


class MalformedGeometryError(ContractError):
    """Raised when GeoJSON coordinates are not nested number arrays."""

    default_stage = "geometry"
    default_code = "MALFORMED_GEOMETRY"


class InvalidReferencePointError(ValidationError):
    """Raised when a reference point has a NaN or infinite coordinate."""

    default_stage = "geometry"
    default_code = "INVALID_REFERENCE_POINT"
