"""State-usage extraction from component source text.

Matching is purely lexical: each line of the component text is run through
an ordered pattern table. Import bindings are never resolved, so a local
helper that happens to be called ``useStore`` counts as a redux hook.
"""

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from hookscan.helpers.dto.analysis_dto import StateKind, StateUsage
from hookscan.helpers.exceptions import ConfigError

logger = logging.getLogger(__name__)

# Trailing invocation opener removed from a match to obtain the token
_INVOCATION_OPENER = re.compile(r"\s*[<(]")


@dataclass(frozen=True)
class StatePattern:
    """One row of the pattern table: a call-site regex and the kind it reports."""

    regex: re.Pattern[str]
    kind: StateKind


def _pattern(expression: str, kind: StateKind) -> StatePattern:
    # ASCII-only \w and \s: "useCaféStore(" is not a store hook
    return StatePattern(re.compile(expression, re.ASCII), kind)


# Order matters: usages on a line are reported in table order
DEFAULT_PATTERNS: tuple[StatePattern, ...] = (
    _pattern(r"useState\s*[<(]", StateKind.LOCAL_STATE),
    _pattern(r"useContext\s*\(", StateKind.CONTEXT),
    _pattern(r"useReducer\s*\(", StateKind.REDUCER),
    _pattern(r"use[A-Z]\w*Store\s*\(", StateKind.ZUSTAND),
    _pattern(r"useAtom\s*\(", StateKind.JOTAI),
    _pattern(r"useAtomValue\s*\(", StateKind.JOTAI),
    _pattern(r"useSetAtom\s*\(", StateKind.JOTAI),
    _pattern(r"useSelector\s*[<(]", StateKind.REDUX),
    _pattern(r"useDispatch\s*[<(]", StateKind.REDUX),
    _pattern(r"useStore\s*[<(]", StateKind.REDUX),
)


def build_pattern_table(extra_patterns: Iterable[dict[str, Any]] | None = None) -> tuple[StatePattern, ...]:
    """
    Default pattern table followed by configured extra rows.

    Args:
        extra_patterns: Dicts with "pattern" (regex) and "kind" (a StateKind value
            such as "zustand", or a member name such as "ZUSTAND")

    Returns:
        Tuple of StatePattern, defaults first

    Raises:
        ConfigError: If a row is missing keys, has an unknown kind or an invalid regex
    """
    if not extra_patterns:
        return DEFAULT_PATTERNS

    table = list(DEFAULT_PATTERNS)
    for row in extra_patterns:
        if not isinstance(row, dict) or "pattern" not in row or "kind" not in row:
            raise ConfigError(f"Pattern entries need 'pattern' and 'kind' keys, got: {row!r}")
        table.append(StatePattern(_compile(row["pattern"]), _parse_kind(row["kind"])))

    logger.debug("[extractor] Pattern table has %d rows", len(table))
    return tuple(table)


def _compile(expression: str) -> re.Pattern[str]:
    try:
        return re.compile(expression)
    except (re.error, TypeError) as e:
        raise ConfigError(f"Invalid state pattern {expression!r}: {e}") from e


def _parse_kind(value: str) -> StateKind:
    try:
        return StateKind(value)
    except ValueError:
        pass
    try:
        return StateKind[str(value).upper()]
    except KeyError:
        known = ", ".join(k.value for k in StateKind)
        raise ConfigError(f"Unknown state kind {value!r} (expected one of: {known})") from None


def strip_invocation(match_text: str) -> str:
    """``"useState<"`` -> ``"useState"``, ``"useAtom ("`` -> ``"useAtom"``."""
    return _INVOCATION_OPENER.sub("", match_text, count=1)


def find_state_usages(
    code: str,
    file: str,
    component: str,
    patterns: Sequence[StatePattern] = DEFAULT_PATTERNS,
) -> list[StateUsage]:
    """Find state-management call sites in a component's text.

    Args:
        code: Literal text of the component (body block or initializer)
        file: Relative path recorded on each usage
        component: Owning component name recorded on each usage
        patterns: Ordered pattern table

    Returns:
        Usages ordered by line, then pattern table order, then left to right.
        Lines are 1-based and relative to ``code``. No deduplication.

    """
    usages: list[StateUsage] = []

    for line_number, line in enumerate(code.split("\n"), start=1):
        for pattern in patterns:
            for match in pattern.regex.finditer(line):
                usages.append(
                    StateUsage(
                        kind=pattern.kind,
                        token=strip_invocation(match.group(0)),
                        file=file,
                        line=line_number,
                        component=component,
                    ),
                )

    return usages
