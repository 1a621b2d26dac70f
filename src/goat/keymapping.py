"""Custom keybinding specs: parsing and validation.

A mapping spec has the form ``<retcode>:<key>:<label>``, where ``retcode``
is the process exit code to use when ``key`` is pressed. Exit codes are
limited to 64-113 so they never collide with codes reserved by shells.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

MIN_EXIT_CODE = 64
MAX_EXIT_CODE = 113

_RETCODE_PATTERN = re.compile(r"[+-]?[0-9]+")


class KeymapError(ValueError):
    """Base class for invalid mapping specs."""

    def __init__(self, raw: str, message: str) -> None:
        self.raw = raw
        super().__init__(message)


class MalformedSpecError(KeymapError):
    """Spec does not split into exactly three fields."""

    def __init__(self, raw: str) -> None:
        super().__init__(
            raw,
            f"Invalid mapping '{raw}', format should be <retcode>:<key>:<label>",
        )


class InvalidExitCodeError(KeymapError):
    """Retcode field is not a number or lies outside 64-113."""

    def __init__(self, raw: str, retcode: str) -> None:
        self.retcode = retcode
        super().__init__(
            raw,
            f"Invalid mapping '{raw}', retcode '{retcode}' is either not a number "
            f"or < {MIN_EXIT_CODE} or > {MAX_EXIT_CODE}",
        )


@dataclass(frozen=True)
class Binding:
    """A key that ends the countdown with its own exit code."""

    exit_code: int
    key: str
    label: str


def _parse_exit_code(raw: str, field: str) -> int:
    if _RETCODE_PATTERN.fullmatch(field) is None:
        raise InvalidExitCodeError(raw, field)
    exit_code = int(field)
    if exit_code < MIN_EXIT_CODE or exit_code > MAX_EXIT_CODE:
        raise InvalidExitCodeError(raw, field)
    return exit_code


def parse_binding(raw: str) -> Binding:
    """Parse a single ``<retcode>:<key>:<label>`` spec."""
    fields = raw.split(":")
    if len(fields) != 3:
        raise MalformedSpecError(raw)
    retcode, key, label = fields
    return Binding(exit_code=_parse_exit_code(raw, retcode), key=key, label=label)


def resolve(raw_specs: Iterable[str]) -> tuple[Binding, ...]:
    """Compile raw mapping specs into bindings, preserving input order.

    Stops at the first invalid spec. Keys are not checked for duplicates or
    for clashes with the built-in ``q``/``c`` keys: the engine registers
    bindings after the built-ins, so the last registration for a key wins.

    Raises:
        MalformedSpecError: A spec has a field count other than three.
        InvalidExitCodeError: A retcode is not an integer in 64-113.
    """
    return tuple(parse_binding(raw) for raw in raw_specs)
