from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum

from .image import Image


class FilterStatus(IntEnum):
    OK = 0
    EMPTY_INPUT = -1
    DIMENSION_MISMATCH = -2
    INVALID_PARAMETER = -3


class FilterError(Exception):
    """Raised by FilterResult.unwrap() for a failed filter call."""
    status = None

    def __init__(self, message: str = ""):
        super().__init__(message or self.status.name.lower())


class EmptyInputError(FilterError):
    status = FilterStatus.EMPTY_INPUT


class DimensionMismatchError(FilterError):
    status = FilterStatus.DIMENSION_MISMATCH


class InvalidParameterError(FilterError):
    status = FilterStatus.INVALID_PARAMETER


_ERRORS = {cls.status: cls for cls in (EmptyInputError, DimensionMismatchError, InvalidParameterError)}


@dataclass(frozen=True)
class FilterResult:
    """
    Outcome of one filter call: a status code plus the produced image.
    ``image`` is only set on success.
    """
    status: FilterStatus
    image: Image | None = None
    message: str = ""

    @classmethod
    def success(cls, image: Image) -> FilterResult:
        return cls(FilterStatus.OK, image)

    @classmethod
    def failure(cls, status: FilterStatus, message: str = "") -> FilterResult:
        return cls(status, None, message)

    @property
    def ok(self) -> bool:
        return self.status == FilterStatus.OK

    @property
    def code(self) -> int:
        return int(self.status)

    def unwrap(self) -> Image:
        """Return the image, or raise the FilterError matching the status."""
        if self.ok:
            return self.image
        raise _ERRORS[self.status](self.message)
