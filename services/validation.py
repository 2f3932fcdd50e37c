"""
Declarative request-parameter validation.

A rule set is an ordered list of Rule descriptors. validate() evaluates every rule whose
guard holds and collects all failures instead of stopping at the first one, so a caller
sees every problem with its request in a single 400 response.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Literal, Mapping, Optional

Location = Literal["query", "path"]
Check = Callable[[str], bool]
Guard = Callable[[Mapping[str, str]], bool]

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _always(_params: Mapping[str, str]) -> bool:
    return True


@dataclass(frozen=True)
class ValidationFailure:
    parameter: str
    value: Optional[str]
    message: str
    location: Location

    def to_dict(self) -> dict[str, Any]:
        return {
            "value": self.value,
            "message": self.message,
            "parameter": self.parameter,
            "location": self.location,
        }


@dataclass(frozen=True)
class Rule:
    parameter: str
    location: Location
    check: Check
    message: str
    optional: bool = True
    default: Optional[str] = None
    guard: Guard = field(default=_always)


# --- checks ---


def is_int(minimum: Optional[int] = None, maximum: Optional[int] = None) -> Check:
    """Integer string (sign and leading zeros allowed) within inclusive bounds."""
    def check(value: str) -> bool:
        if not _INT_RE.fullmatch(value):
            return False
        n = int(value)
        if minimum is not None and n < minimum:
            return False
        if maximum is not None and n > maximum:
            return False
        return True

    return check


def min_length(n: int) -> Check:
    return lambda value: len(value) >= n


def is_in(values: Iterable[str]) -> Check:
    allowed = frozenset(values)
    return lambda value: value in allowed


def matches(pattern: re.Pattern[str]) -> Check:
    return lambda value: pattern.fullmatch(value) is not None


# --- guards ---


def present(parameter: str) -> Guard:
    return lambda params: parameter in params


def absent(parameter: str) -> Guard:
    return lambda params: parameter not in params


# --- evaluation ---


def validate(rules: Iterable[Rule], params: Mapping[str, str]) -> list[ValidationFailure]:
    failures: list[ValidationFailure] = []
    for rule in rules:
        if not rule.guard(params):
            continue
        value = params.get(rule.parameter)
        if value is None:
            if not rule.optional:
                failures.append(ValidationFailure(rule.parameter, None, rule.message, rule.location))
            continue
        if not rule.check(value):
            failures.append(ValidationFailure(rule.parameter, value, rule.message, rule.location))
    return failures


def apply_defaults(rules: Iterable[Rule], params: Mapping[str, str]) -> dict[str, str]:
    """Copy of params with defaults filled in for absent parameters of applicable rules."""
    out = dict(params)
    for rule in rules:
        if rule.default is not None and rule.parameter not in out and rule.guard(params):
            out[rule.parameter] = rule.default
    return out
