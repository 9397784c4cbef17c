"""
Data models for the extraction pipeline.
Defines the request handed to the runner and the per-URL results it returns.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Tuple

from revelio.core.exceptions import InputError


class ExtractionMode(Enum):
    DICTIONARY = "dict"
    ENUMERATION = "enum"


def _as_tuple(values: Optional[Iterable[str]]) -> Tuple[str, ...]:
    if values is None:
        return ()
    if isinstance(values, str):
        return (values,)
    return tuple(values)


@dataclass(frozen=True)
class ExtractionRequest:
    urls: Tuple[str, ...]
    mode: ExtractionMode
    variables: Tuple[str, ...] = ()
    filters: Tuple[str, ...] = ()
    min_length: int = 0

    def __post_init__(self):
        object.__setattr__(self, "urls", _as_tuple(self.urls))
        object.__setattr__(self, "variables", _as_tuple(self.variables))
        object.__setattr__(self, "filters", _as_tuple(self.filters))

        if not self.urls:
            raise InputError("No URLs provided. Use -u or -U to provide URLs.")

        if self.mode == ExtractionMode.DICTIONARY:
            if not self.variables:
                raise InputError("No variables provided and default wordlist is empty or missing.")
            object.__setattr__(self, "filters", ())
            object.__setattr__(self, "min_length", 0)
        else:
            if self.variables:
                raise InputError("Enumeration mode does not take a variable list.")
            if self.min_length is None:
                object.__setattr__(self, "min_length", 0)
            if self.min_length < 0:
                raise InputError(f"Minimum length must be non-negative, got {self.min_length}")

    @classmethod
    def dictionary(cls, urls: Iterable[str], variables: Iterable[str]) -> "ExtractionRequest":
        return cls(urls=urls, mode=ExtractionMode.DICTIONARY, variables=variables)

    @classmethod
    def enumeration(
        cls,
        urls: Iterable[str],
        filters: Iterable[str] = (),
        min_length: int = 0
    ) -> "ExtractionRequest":
        return cls(
            urls=urls,
            mode=ExtractionMode.ENUMERATION,
            filters=filters,
            min_length=min_length
        )

    def to_dict(self) -> dict:
        return {
            "urls": list(self.urls),
            "mode": self.mode.value,
            "variables": list(self.variables),
            "filters": list(self.filters),
            "min_length": self.min_length
        }


@dataclass(frozen=True)
class Finding:
    name: str
    value: str

    def __str__(self) -> str:
        return f"{self.name} = {self.value}"

    def to_dict(self) -> dict:
        return {"name": self.name, "value": self.value}

    @classmethod
    def from_dict(cls, data: dict) -> "Finding":
        return cls(name=data["name"], value=data["value"])


@dataclass(frozen=True)
class UrlResult:
    url: str
    findings: Tuple[Finding, ...] = field(default_factory=tuple)
    error: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "findings", tuple(self.findings))
        if self.error is not None and self.findings:
            raise ValueError("A failed URL result cannot carry findings")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, url: str, error: str) -> "UrlResult":
        return cls(url=url, findings=(), error=error or "Unknown error")

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "findings": [f.to_dict() for f in self.findings],
            "error": self.error
        }

    @classmethod
    def from_dict(cls, data: dict) -> "UrlResult":
        data = data.copy()
        data["findings"] = tuple(Finding.from_dict(f) for f in data.get("findings", []))
        return cls(**data)
