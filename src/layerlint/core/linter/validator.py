from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between untrusted configuration sources (CLI flags, config
files, the persisted user state) and the linter. Coerces types, injects
defaults and collects human-readable warnings. Unknown rule identifiers
are never coerced: they abort the run before any traversal starts.
"""

import logging
from typing import Any, Dict, List, Tuple

from layerlint.core.rules.patterns import compile_patterns
from layerlint.domain.config import get_default_config, normalize_config_keys
from layerlint.domain.constants import DEFAULT_MAX_DEPTH, RULE_IDS
from layerlint.domain.errors import InvalidConfiguration

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: A tuple containing the normalized
                                          configuration and a list of warnings.

    Raises:
        InvalidConfiguration: If 'enabled_rules' names an unknown rule or holds
                              an entry that is not a rule id (non-string, blank), or
                              (strict mode) on unknown options and bad patterns.
        TypeError: In strict mode, on type mismatches.
        ValueError: In strict mode, on out-of-range values.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    raw = normalize_config_keys(config)

    unknown = sorted(k for k in raw if k not in defaults)
    if unknown:
        msg = f"Unknown option(s): {', '.join(unknown)}."
        if strict:
            raise InvalidConfiguration(msg, unknown)
        warnings.append(f"{msg} Ignored.")

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in raw.items() if k in defaults})

    # 2. Field Processing & Normalization
    merged["enabled_rules"] = _as_rule_ids(merged["enabled_rules"], warnings, strict)
    merged["generic_name_patterns"] = _normalize_patterns(
        _as_list_str(merged["generic_name_patterns"], [], "generic_name_patterns", warnings, strict),
        warnings,
        strict,
    )
    merged["semantic_section_names"] = _as_list_str(
        merged["semantic_section_names"],
        defaults["semantic_section_names"],
        "semantic_section_names",
        warnings,
        strict,
    )
    merged["max_depth"] = _as_positive_int(
        merged["max_depth"], DEFAULT_MAX_DEPTH, "max_depth", warnings, strict
    )
    merged["include_hidden"] = _as_bool(
        merged["include_hidden"], defaults["include_hidden"], "include_hidden", warnings, strict
    )

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_positive_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Accept ints (and numeric strings outside strict mode) that are at least 1."""
    if value is None:
        return fallback

    number = None
    if isinstance(value, int) and not isinstance(value, bool):
        number = value
    elif isinstance(value, str) and not strict and value.strip().lstrip("-").isdigit():
        number = int(value.strip())
        warnings.append(f"Field '{field}' converted from '{value}' to {number}.")

    if number is None:
        msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    if number < 1:
        msg = f"Invalid field '{field}': must be at least 1, received {number}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    return number


def _as_list_str(value: Any, fallback: List[str], field: str, warnings: List[str], strict: bool) -> List[str]:
    """Ensure input is a list of sanitized strings, supporting CSV parsing and sets."""
    if value is None:
        return list(fallback)

    if isinstance(value, str) and not strict:
        items = [x.strip() for x in value.split(",") if x.strip()]
        if items:
            warnings.append(f"Field '{field}' converted from CSV string to list.")
            return items
        return list(fallback)

    if isinstance(value, (set, frozenset)):
        value = sorted(value, key=str)

    if isinstance(value, (list, tuple)):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                s = item.strip()
                if s:
                    out.append(s)
            else:
                msg = f"Invalid item in '{field}[{i}]': expected str."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
        return out if out or not value else list(fallback)

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return list(fallback)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _as_rule_ids(value: Any, warnings: List[str], strict: bool) -> List[str]:
    """
    Resolve the rule selection. Nothing here is coerced away: an entry that
    cannot name a rule aborts the run like an unknown rule id does.
    """
    if value is not None and not isinstance(value, (str, list, tuple, set, frozenset)):
        raise InvalidConfiguration(
            f"Invalid field 'enabled_rules': expected a list of rule ids, received {type(value).__name__}.",
            [repr(value)],
        )

    if isinstance(value, (list, tuple, set, frozenset)):
        bad = [repr(item) for item in value if not isinstance(item, str) or not item.strip()]
        if bad:
            raise InvalidConfiguration(
                f"Invalid rule id(s) in enabled_rules: {', '.join(sorted(bad))}. "
                f"Known rules: {', '.join(RULE_IDS)}.",
                bad,
            )

    return _normalize_rules(_as_list_str(value, list(RULE_IDS), "enabled_rules", warnings, strict))


def _normalize_rules(rule_ids: List[str]) -> List[str]:
    """Reject unknown rule ids and return the rest in registry order."""
    requested = {r.strip().lower() for r in rule_ids}
    unknown = sorted(requested - set(RULE_IDS))
    if unknown:
        raise InvalidConfiguration(
            f"Unknown rule id(s) in enabled_rules: {', '.join(unknown)}. "
            f"Known rules: {', '.join(RULE_IDS)}.",
            unknown,
        )
    return [r for r in RULE_IDS if r in requested]


def _normalize_patterns(patterns: List[str], warnings: List[str], strict: bool) -> List[str]:
    """Drop placeholder patterns that are not valid regular expressions."""
    _, rejected = compile_patterns(patterns)
    if not rejected:
        return patterns
    msg = f"Invalid regular expression(s) in generic_name_patterns: {', '.join(rejected)}."
    if strict:
        raise InvalidConfiguration(msg, rejected)
    warnings.append(f"{msg} Discarded.")
    return [p for p in patterns if p not in rejected]
