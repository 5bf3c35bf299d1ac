"""Typed failures raised by the extractor and normalizer.

Every error carries a machine-checkable ``kind`` plus optional diagnostic
context (offending substring, offset). Presentation is left to the caller.
"""

from __future__ import annotations

import enum


class ErrorKind(str, enum.Enum):
    MISSING_VIEWBOX = "MissingViewBox"
    MISSING_PATH = "MissingPath"
    MALFORMED_VIEWBOX = "MalformedViewBox"
    INVALID_PATH_START = "InvalidPathStart"
    INVALID_DIMENSIONS = "InvalidDimensions"
    UNSUPPORTED_NUMBER_FORMAT = "UnsupportedNumberFormat"


class SvgMaskError(Exception):
    """Base class for all conversion failures."""

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind | None = None,
        detail: str | None = None,
        position: int | None = None,
    ) -> None:
        super().__init__(message)
        if kind is not None:
            self.kind = kind
        self.message = message
        self.detail = detail
        self.position = position

    def to_dict(self) -> dict[str, object]:
        return {
            "error": self.kind.value,
            "message": self.message,
            "detail": self.detail,
            "position": self.position,
        }


# ── Extraction ────────────────────────────────────────────────────────────


class ExtractionError(SvgMaskError):
    """Markup could not be turned into a ParsedIcon.

    Raised directly (with the cause's kind) when normalization of the
    extracted path fails; the NormalizationError is chained as __cause__.
    """

    @classmethod
    def wrap(cls, cause: SvgMaskError) -> ExtractionError:
        return cls(
            f"Path normalization failed: {cause.message}",
            kind=cause.kind,
            detail=cause.detail,
            position=cause.position,
        )


class MissingViewBox(ExtractionError):
    kind = ErrorKind.MISSING_VIEWBOX


class MissingPath(ExtractionError):
    kind = ErrorKind.MISSING_PATH


class MalformedViewBox(ExtractionError):
    kind = ErrorKind.MALFORMED_VIEWBOX


# ── Normalization ─────────────────────────────────────────────────────────


class NormalizationError(SvgMaskError):
    """Path data could not be normalized."""


class InvalidPathStart(NormalizationError):
    kind = ErrorKind.INVALID_PATH_START


class InvalidDimensions(NormalizationError):
    kind = ErrorKind.INVALID_DIMENSIONS


class UnsupportedNumberFormat(NormalizationError):
    kind = ErrorKind.UNSUPPORTED_NUMBER_FORMAT
