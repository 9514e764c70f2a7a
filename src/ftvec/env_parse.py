"""Environment variable parsing for ftvec settings.

Every FTVEC_* variable goes through these helpers so that blank values,
casing and invalid input behave identically everywhere.

- Unset / empty / whitespace -> default.
- strict=True (default): invalid values raise ``ConfigError``.
- strict=False: invalid values log a warning and return the default.
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a configuration value is invalid."""


def parse_str(name: str, default: str | None = None) -> str | None:
    """Parse a string environment variable, stripped.

    Returns *default* when the variable is unset or blank.
    """
    raw = os.environ.get(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def parse_enum(
    name: str,
    allowed: set[str],
    default: str | None = None,
    *,
    casefold: bool = True,
    strict: bool = True,
) -> str | None:
    """Parse an enum-like environment variable.

    Args:
        name: Environment variable name.
        allowed: Set of valid values (canonical casing).
        default: Value when unset or empty.
        casefold: If *True*, comparison is case-insensitive and the
                  canonical (as-in-*allowed*) form is returned.
        strict: If *True*, invalid values raise :class:`ConfigError`.
                If *False*, invalid values log a warning and return *default*.
    """
    v = parse_str(name)
    if v is None:
        return default
    match = match_enum(v, allowed, casefold=casefold)
    if match is not None:
        return match
    if strict:
        raise ConfigError(f"invalid value for {name}: {v!r} (allowed: {sorted(allowed)})")
    logger.warning(
        "Invalid value for %s: %r (allowed: %s), using default %s",
        name,
        v,
        sorted(allowed),
        default,
    )
    return default


def match_enum(value: str, allowed: set[str], *, casefold: bool = True) -> str | None:
    """Return the canonical member of *allowed* matching *value*, or None."""
    if casefold:
        lookup = {a.lower(): a for a in allowed}
        return lookup.get(value.strip().lower())
    return value if value in allowed else None
