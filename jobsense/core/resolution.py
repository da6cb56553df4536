"""Resolution of configuration values from an ordered list of sources.

A source is any mapping (explicit tool fields, the process environment,
loaded settings). Lookups are expressed as ``(source, key)`` pairs and
tried in order; the first non-empty value wins. Nothing here reads
global state, so precedence can be tested in isolation.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

Lookup: TypeAlias = tuple[Mapping[str, Any], str]


@dataclass(frozen=True)
class Resolved:
    """A value found in one of the sources."""

    value: Any
    key: str


@dataclass(frozen=True)
class Absent:
    """No source supplied a usable value.

    ``tried`` lists the keys that were consulted, in order.
    """

    tried: tuple[str, ...]

    def describe(self) -> str:
        return " or ".join(dict.fromkeys(self.tried))


Resolution: TypeAlias = Resolved | Absent


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def resolve(lookups: Iterable[Lookup]) -> Resolution:
    """Return the first non-empty value among the given lookups.

    Args:
        lookups: ``(source, key)`` pairs in precedence order.

    Returns:
        Resolved with the winning value and key, or Absent listing every
        key tried.
    """
    tried: list[str] = []
    for source, key in lookups:
        tried.append(key)
        value = source.get(key)
        if not _is_empty(value):
            return Resolved(value=value, key=key)
    return Absent(tried=tuple(tried))


def resolve_value(lookups: Iterable[Lookup], default: Any = None) -> Any:
    """Shorthand for callers that only need the value."""
    resolution = resolve(lookups)
    if isinstance(resolution, Resolved):
        return resolution.value
    return default


def field_then_env(
    fields: Mapping[str, Any], environ: Mapping[str, str], *keys: str
) -> list[Lookup]:
    """Build lookups that try each key in ``fields`` and then ``environ``."""
    lookups: list[Lookup] = []
    for key in keys:
        lookups.append((fields, key))
        lookups.append((environ, key))
    return lookups


def parse_timeout_ms(value: Any) -> int:
    """Parse a timeout in milliseconds from a field or environment value.

    Raises:
        ValueError: If the value is not a positive whole number.
    """
    if isinstance(value, bool):
        raise ValueError(f"timeout must be a number of milliseconds, got {value!r}")
    if isinstance(value, (int, float)):
        timeout = int(value)
    elif isinstance(value, str):
        try:
            timeout = int(value.strip())
        except ValueError:
            raise ValueError(
                f"timeout must be a number of milliseconds, got {value!r}"
            ) from None
    else:
        raise ValueError(f"timeout must be a number of milliseconds, got {value!r}")
    if timeout <= 0:
        raise ValueError(f"timeout must be positive, got {timeout}")
    return timeout


_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off", ""}


def parse_flag(value: Any) -> bool:
    """Parse a boolean flag given as a bool or a config-file string.

    Raises:
        ValueError: If the value is neither a bool nor a recognized string.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE:
            return True
        if text in _FALSE:
            return False
    raise ValueError(f"expected true or false, got {value!r}")
