# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared parser infrastructure and helper utilities."""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Final, Protocol, TypeAlias, runtime_checkable

from ..errors import OutputParseError
from ..models import Issue, RawToolOutput

LOGGER = logging.getLogger(__name__)

JsonValue: TypeAlias = Any
JsonTransform = Callable[[JsonValue, "ParseContext"], Sequence[Issue]]

_CLOSERS: Final[dict[str, str]] = {"{": "}", "[": "]"}
_MAX_CANDIDATES: Final[int] = 4
TRANSFORM_ERRORS: Final[tuple[type[Exception], ...]] = (ValueError, TypeError, OverflowError)


def _identity(path: str) -> str:
    return path


@dataclass(frozen=True, slots=True)
class ParseContext:
    """Describe the tool whose output is parsed and how to report its paths."""

    tool: str
    source: str
    resolve_path: Callable[[str], str] = field(default=_identity)


@runtime_checkable
class Parser(Protocol):
    """Convert captured tool output into canonical issues."""

    def parse(self, output: RawToolOutput, *, context: ParseContext) -> Sequence[Issue]:
        """Return issues parsed from *output*.

        Raises:
            OutputParseError: If the output holds no recoverable payload.
        """

        raise NotImplementedError


class ScanState(str, Enum):
    """States of the bracket-trimming scanner used by :func:`extract_json_payload`."""

    SCAN_START = "scan_start"
    SCAN_END = "scan_end"
    TRIM_COMMA = "trim_comma"
    DONE = "done"
    NOT_FOUND = "not_found"


@dataclass(slots=True)
class JsonPayloadScanner:
    """Locate a JSON document embedded in noisy tool output.

    ``SCAN_START`` finds the first ``{`` or ``[`` at or after ``offset``,
    ``SCAN_END`` finds the last closer of the same kind, and ``TRIM_COMMA``
    drops any trailing commas that sit directly before that closer.
    """

    text: str
    offset: int = 0
    state: ScanState = ScanState.SCAN_START
    start: int = -1
    end: int = -1
    payload: str | None = None

    def run(self) -> str | None:
        while self.state not in {ScanState.DONE, ScanState.NOT_FOUND}:
            self.step()
        return self.payload

    def step(self) -> ScanState:
        if self.state is ScanState.SCAN_START:
            self.start = _first_opener(self.text, self.offset)
            self.state = ScanState.SCAN_END if self.start >= 0 else ScanState.NOT_FOUND
        elif self.state is ScanState.SCAN_END:
            self.end = self.text.rfind(_CLOSERS[self.text[self.start]])
            self.state = ScanState.TRIM_COMMA if self.end > self.start else ScanState.NOT_FOUND
        elif self.state is ScanState.TRIM_COMMA:
            self.payload = _strip_trailing_comma(self.text[self.start : self.end + 1])
            self.state = ScanState.DONE
        return self.state


def _first_opener(text: str, offset: int) -> int:
    positions = [index for index in (text.find("{", offset), text.find("[", offset)) if index >= 0]
    return min(positions) if positions else -1


def _strip_trailing_comma(fragment: str) -> str:
    body = fragment[:-1].rstrip()
    if not body.endswith(","):
        return fragment
    while body.endswith(","):
        body = body[:-1].rstrip()
    return body + fragment[-1]


def extract_json_payload(text: str, *, offset: int = 0) -> str | None:
    """Return the JSON-looking substring of *text*, or ``None`` without a bracket pair.

    Feeding the result back through this function returns it unchanged.
    """

    return JsonPayloadScanner(text, offset=offset).run()


def iter_json_candidates(text: str, *, limit: int = _MAX_CANDIDATES) -> Iterator[str]:
    """Yield successive payload candidates, each starting at a later opening bracket."""

    offset = 0
    for _ in range(limit):
        scanner = JsonPayloadScanner(text, offset=offset)
        payload = scanner.run()
        if payload is None:
            return
        yield payload
        offset = scanner.start + 1


def load_json_payload(output: RawToolOutput, *, tool: str) -> JsonValue:
    """Return the first decodable JSON payload from stdout, then the combined stream.

    Raises:
        OutputParseError: If no bracket pair is present or nothing decodes.
    """

    streams = [output.stdout.strip()]
    combined = output.combined.strip()
    if combined != streams[0]:
        streams.append(combined)
    last_error = "no JSON data found in linter output"
    for stream in streams:
        for candidate in iter_json_candidates(stream):
            try:
                return json.loads(candidate)
            except json.JSONDecodeError as exc:
                last_error = f"invalid JSON payload: {exc}"
                LOGGER.debug("%s: rejected JSON candidate (%s)", tool, exc)
    raise OutputParseError(tool, last_error)


def coerce_str(value: object) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def coerce_int(value: object, default: int = 0) -> int:
    """Return *value* as an ``int`` or *default* when it is not numeric."""

    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else default
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return default
    return default


def iter_dicts(value: JsonValue) -> Iterator[Mapping[str, JsonValue]]:
    """Yield mapping items from ``value`` when it is a sequence of dict-like objects."""

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        for item in value:
            if isinstance(item, Mapping):
                yield item


@dataclass(frozen=True, slots=True)
class JsonParser:
    """Extract the JSON payload from noisy output and delegate to a transform."""

    transform: JsonTransform

    def parse(self, output: RawToolOutput, *, context: ParseContext) -> Sequence[Issue]:
        if not output.combined.strip():
            LOGGER.info("%s produced no output", context.tool)
            return ()
        payload = load_json_payload(output, tool=context.tool)
        try:
            return self.transform(payload, context)
        except TRANSFORM_ERRORS as exc:
            raise OutputParseError(context.tool, f"unexpected payload shape: {exc}") from exc


@dataclass(frozen=True, slots=True)
class NormalizedOutput:
    """Issues recovered from one tool plus the parse failure, if any."""

    issues: tuple[Issue, ...]
    error: OutputParseError | None = None


def normalize_output(parser: Parser, output: RawToolOutput, context: ParseContext) -> NormalizedOutput:
    """Parse *output* leniently: a parse failure yields zero issues, never an exception."""

    try:
        issues = tuple(parser.parse(output, context=context))
    except OutputParseError as exc:
        LOGGER.warning("%s", exc)
        return NormalizedOutput(issues=(), error=exc)
    LOGGER.debug("%s: normalised %d issue(s)", context.tool, len(issues))
    return NormalizedOutput(issues=issues)


__all__ = [
    "JsonParser",
    "JsonPayloadScanner",
    "JsonTransform",
    "JsonValue",
    "NormalizedOutput",
    "ParseContext",
    "Parser",
    "ScanState",
    "TRANSFORM_ERRORS",
    "coerce_int",
    "coerce_str",
    "extract_json_payload",
    "iter_dicts",
    "iter_json_candidates",
    "load_json_payload",
    "normalize_output",
]
