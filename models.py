from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class PageRange:
    """Inclusive 1-based page interval."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 1 or self.end < self.start:
            raise ValueError(f"Bad page range: {self.start}-{self.end}")

    def __iter__(self):
        # allows `a, b = page_range`
        yield self.start
        yield self.end

    def pages(self) -> range:
        return range(self.start, self.end + 1)

    def zero_based(self) -> list[int]:
        return [p - 1 for p in self.pages()]


@dataclass
class Payload:
    data: bytes
    mime_type: str | None = None
    file_name: str | None = None


@dataclass
class Record:
    """Workflow item: JSON-like metadata plus named binary payloads."""

    metadata: dict[str, Any] = field(default_factory=dict)
    payloads: dict[str, Payload] = field(default_factory=dict)


@dataclass(frozen=True)
class RasterImage:
    page_number: int
    data: bytes
    format: str
    width: int
    height: int
    quality: float | None = None

    @property
    def file_name(self) -> str:
        return f"page-{self.page_number}.{self.format}"


@dataclass(frozen=True)
class OcrResult:
    page_number: int
    text: str
