"""Command-line grammar for the split verbs.

Flags come first, in `--name=value` or `--name value` form. A per-verb manual
hook sees every token before flag matching and may claim the rest of the
stream as a verbatim capture, after which no further flags are parsed.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from splitctl.errors import ArgParseError, HelpRequested

HELP_TOKENS = frozenset({"-h", "--help"})
FLAG_PREFIX = "--"


@dataclass(frozen=True)
class Flag:
    """One `--name` flag accepted by a verb."""

    name: str
    default: Any = None
    convert: Callable[[str], Any] = str
    required: bool = False


@dataclass(frozen=True)
class Capture:
    """Value drained from the remaining tokens by a manual hook."""

    value: Any


type ManualHook = Callable[[str, Sequence[str]], Capture | None]


@dataclass(frozen=True)
class OptionsSchema:
    """Flags and trailing-capture policy for one verb."""

    verb: str
    flags: tuple[Flag, ...] = ()
    hook: ManualHook | None = None

    def flag(self, name: str) -> Flag | None:
        for candidate in self.flags:
            if candidate.name == name:
                return candidate
        return None


@dataclass(frozen=True)
class Diagnostic:
    """Parse-time warning recorded instead of failing."""

    token: str
    message: str


@dataclass
class OptionsRecord:
    """Parsed flags for one invocation."""

    values: dict[str, Any] = field(default_factory=dict)
    capture: Any = None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def get(self, name: str, default: Any = None) -> Any:
        return self.values.get(name, default)


def _looks_like_option(token: str) -> bool:
    return token.startswith("-") and token != "-"


def exec_capture(sentinel: str = "-e") -> ManualHook:
    """Claim everything after `sentinel` as an argv-style command vector."""

    def hook(token: str, rest: Sequence[str]) -> Capture | None:
        if token != sentinel:
            return None
        return Capture(tuple(rest))

    return hook


def text_capture(flag_prefix: str = "--") -> ManualHook:
    """Claim the first non-flag token and everything after it as one text value.

    `-h`/`--help` are left for the parser. A bare `--` starts the capture with
    the token after it, so text that looks like a flag can still be sent.
    """

    def hook(token: str, rest: Sequence[str]) -> Capture | None:
        if token == "--":
            return Capture(" ".join(rest))
        if token in HELP_TOKENS or token.startswith(flag_prefix):
            return None
        return Capture(" ".join([token, *rest]))

    return hook


def parse_options(
    schema: OptionsSchema,
    tokens: Sequence[str],
    *,
    collect_diagnostics: bool = False,
) -> OptionsRecord:
    """Parse raw tokens into an options record for `schema`.

    Raises:
        HelpRequested: `-h` or `--help` was seen before any capture.
        ArgParseError: A flag is unknown, malformed, missing its value or
            fails conversion.
    """

    record = OptionsRecord(values={flag.name: flag.default for flag in schema.flags})
    seen: set[str] = set()

    def reject(token: str, message: str) -> None:
        if not collect_diagnostics:
            raise ArgParseError(message)
        record.diagnostics.append(Diagnostic(token=token, message=message))

    idx = 0
    while idx < len(tokens):
        token = tokens[idx]

        # Hooks see help tokens first and must decline them to keep -h/--help working.
        if schema.hook is not None:
            claimed = schema.hook(token, tokens[idx + 1 :])
            if claimed is not None:
                record.capture = claimed.value
                break

        if token in HELP_TOKENS:
            raise HelpRequested(schema.verb)

        if not token.startswith(FLAG_PREFIX):
            if _looks_like_option(token):
                reject(token, f"unknown flag '{token}'")
            else:
                reject(token, f"unexpected argument '{token}'")
            idx += 1
            continue

        key = token[len(FLAG_PREFIX) :]
        value: str | None = None
        if "=" in key:
            key, value = key.split("=", 1)

        flag = schema.flag(key)
        if flag is None:
            reject(token, f"unknown flag '--{key}'")
            idx += 1
            continue

        if value is None:
            # A dash-led next token is never a value; use `--name=-1` for those.
            if idx + 1 < len(tokens) and not _looks_like_option(tokens[idx + 1]):
                value = tokens[idx + 1]
                idx += 1
            else:
                raise ArgParseError(f"missing value for '--{key}'")

        try:
            record.values[flag.name] = flag.convert(value)
        except (TypeError, ValueError) as exc:
            raise ArgParseError(f"invalid value for '--{key}': {value!r} ({exc})") from exc
        seen.add(flag.name)
        idx += 1

    missing = [flag.name for flag in schema.flags if flag.required and flag.name not in seen]
    if missing:
        raise ArgParseError(f"missing required flag '--{missing[0]}'")
    return record
