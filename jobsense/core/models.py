"""Domain models for the JobSense webhook tools.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, TypeAlias

DEFAULT_TIMEOUT_MS = 30000


@dataclass(frozen=True)
class ToolConfiguration:
    """Resolved configuration for a webhook tool.

    Created once when the tool is constructed and never mutated.
    """

    endpoint_url: str | None
    api_key: str | None = None
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    override: bool = False

    def __post_init__(self) -> None:
        """Validate configuration invariants on creation."""
        if not self.override and not self.endpoint_url:
            raise ValueError("endpoint_url must be a non-empty string unless override is set")
        if self.timeout_ms <= 0:
            raise ValueError(f"timeout_ms must be positive, got {self.timeout_ms}")

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000


@dataclass(frozen=True)
class SearchCriteria:
    """Structured job search criteria.

    Every known field is optional; None means "unspecified". Fields the
    schema does not know about are kept in ``extra`` and forwarded as-is.
    """

    position: str | None = None
    location: str | None = None
    skills: tuple[str, ...] | None = None
    experience_level: str | None = None
    job_type: str | None = None
    salary_min: int | float | None = None
    salary_max: int | float | None = None
    remote: bool | None = None
    extra: Mapping[str, Any] | MappingProxyType[str, Any] = field(
        default_factory=dict
    )  # converted to proxy in __post_init__

    KNOWN_FIELDS = (
        "position",
        "location",
        "skills",
        "experience_level",
        "job_type",
        "salary_min",
        "salary_max",
        "remote",
    )

    def __post_init__(self) -> None:
        """Freeze the passthrough fields and reject shadowed names."""
        if isinstance(self.skills, list):
            object.__setattr__(self, "skills", tuple(self.skills))
        if not isinstance(self.extra, MappingProxyType):
            object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))
        shadowed = set(self.extra) & set(self.KNOWN_FIELDS)
        if shadowed:
            raise ValueError(
                f"extra fields cannot shadow known fields: {sorted(shadowed)}"
            )

    def to_payload(self) -> dict[str, Any]:
        """Rebuild the outbound mapping: supplied known fields plus extras."""
        payload: dict[str, Any] = {}
        for name in self.KNOWN_FIELDS:
            value = getattr(self, name)
            if value is None:
                continue
            payload[name] = list(value) if name == "skills" else value
        payload.update(self.extra)
        return payload


@dataclass(frozen=True)
class SearchQuery:
    """A natural-language job search request."""

    query: str

    def __post_init__(self) -> None:
        if not isinstance(self.query, str) or not self.query.strip():
            raise ValueError("query must be a non-empty string")


class FailureKind(Enum):
    """Categories of runtime failure for an outbound webhook call."""

    TIMEOUT = "timeout"
    UNREACHABLE = "unreachable"
    UPSTREAM = "upstream"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class WebhookResponse:
    """A successful (2xx) webhook response.

    ``body`` is the decoded JSON payload, or the raw text when the
    upstream did not answer with JSON.
    """

    status: int
    status_text: str
    body: Any


@dataclass(frozen=True)
class WebhookFailure:
    """A webhook call that did not produce a 2xx response."""

    kind: FailureKind
    message: str
    status: int | None = None
    status_text: str | None = None
    details: Any = None
    error_type: str | None = None  # exception class name, for UNKNOWN


WebhookOutcome: TypeAlias = WebhookResponse | WebhookFailure
