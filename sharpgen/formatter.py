"""Brace-aware re-indentation of generated C# source.

``SourceFormatter`` takes text that is structurally correct but loosely laid
out (block bodies squeezed onto one line, mixed indentation, Allman or K&R
braces) and produces canonical layout:

- one statement per line, indented by one unit per enclosing brace scope;
- opening braces at the end of the declaration line (or on their own line
  with ``BraceStyle.NEXT_LINE``), closing braces on their own line;
- accessor lists such as ``{ get; set; }`` kept inline;
- at most one blank line between members, none after ``{`` or before ``}``.

String literals and comments are copied untouched. The pass is idempotent:
``format(format(x)) == format(x)``.

Only braces drive indentation. ``case`` and ``default`` labels inside a
``switch`` get no extra level, so statements after a label stay at the
label's depth and a label shares its line with the first statement.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from sharpgen.config import BraceStyle, FormatterConfig

logger = logging.getLogger(__name__)

_ACCESSOR_LIST_RE = re.compile(r"^\s*(?:(?:get|set|init)\s*;\s*)+$")
_ACCESSOR_RE = re.compile(r"(get|set|init)\s*;")
_CONTINUATION_RE = re.compile(r"^(?:else|catch|finally)\b")


@dataclass
class _Line:
    level: int
    text: str
    has_comment: bool = False


@dataclass
class _State:
    """Mutable scan state for one ``format`` call."""
    brace_style: BraceStyle
    lines: list[_Line] = field(default_factory=list)
    buf: list[str] = field(default_factory=list)
    buf_has_comment: bool = False
    depth: int = 0
    parens: int = 0
    paren_stack: list[int] = field(default_factory=list)
    newlines: int = 0
    pending_blank: bool = False
    line_open: bool = False

    # -- output ------------------------------------------------------------

    @property
    def last(self) -> _Line | None:
        return self.lines[-1] if self.lines else None

    def emit(self, text: str, has_comment: bool = False) -> None:
        last = self.last
        if last is not None and not last.has_comment and last.text.endswith("}"):
            if text[0] in ";,)":
                last.text += text
                last.has_comment = has_comment
                self.touch()
                return
            if (
                self.brace_style is BraceStyle.END_OF_LINE
                and last.text == "}"
                and _CONTINUATION_RE.match(text)
            ):
                last.text = f"}} {text}"
                last.has_comment = has_comment
                self.touch()
                return

        if self.pending_blank and last is not None and not last.text.endswith("{"):
            self.lines.append(_Line(0, ""))
        self.lines.append(_Line(self.depth, text, has_comment))
        self.touch()

    def touch(self) -> None:
        self.pending_blank = False
        self.newlines = 0
        self.line_open = True

    def flush(self) -> None:
        text = "".join(self.buf).strip()
        has_comment = self.buf_has_comment
        self.buf.clear()
        self.buf_has_comment = False
        if text:
            self.emit(text, has_comment)

    def append(self, text: str) -> None:
        self.buf.append(text)

    def append_space(self) -> None:
        if self.buf and not self.buf[-1].endswith(" "):
            self.buf.append(" ")

    def buffered(self) -> bool:
        return bool("".join(self.buf).strip())

    def can_attach_brace(self) -> bool:
        """Whether a lone ``{`` belongs at the end of the previous line."""
        last = self.last
        if last is None or last.has_comment or not last.text:
            return False
        if last.text.endswith((";", "{", "}", ",")):
            return False
        return not (last.text.startswith("[") and last.text.endswith("]"))

    # -- braces ------------------------------------------------------------

    def open_brace(self) -> None:
        text = "".join(self.buf).strip()
        has_comment = self.buf_has_comment
        self.buf.clear()
        self.buf_has_comment = False

        if self.brace_style is BraceStyle.END_OF_LINE:
            if text:
                self.emit(f"{text} {{", has_comment)
            elif self.can_attach_brace():
                self.last.text += " {"
                self.touch()
            else:
                self.emit("{")
        else:
            if text:
                self.emit(text, has_comment)
            self.emit("{")

        self.paren_stack.append(self.parens)
        self.parens = 0
        self.depth += 1

    def close_brace(self) -> None:
        self.flush()
        self.pending_blank = False
        self.depth = max(self.depth - 1, 0)
        self.parens = self.paren_stack.pop() if self.paren_stack else 0
        self.emit("}")


class SourceFormatter:
    """Normalises indentation and brace placement of C# source text.

    ``switch`` sections are not nested under their ``case`` labels.
    """

    def __init__(self, config: FormatterConfig | None = None) -> None:
        self.config = config or FormatterConfig()

    def format(self, source: str) -> str:
        """Return *source* in canonical layout."""
        state = _State(brace_style=self.config.brace_style)
        i = 0
        n = len(source)

        while i < n:
            ch = source[i]

            if ch == '"':
                verbatim = _is_verbatim_prefix(state.buf)
                end = _scan_string(source, i, verbatim)
                state.append(source[i:end])
                i = end
                continue

            if ch == "'":
                end = _scan_char(source, i)
                state.append(source[i:end])
                i = end
                continue

            if source.startswith("//", i):
                end = source.find("\n", i)
                if end == -1:
                    end = n
                comment = source[i:end].rstrip()
                if state.buffered():
                    state.append_space()
                    state.append(comment)
                    state.buf_has_comment = True
                    state.flush()
                elif state.line_open and state.last is not None:
                    state.last.text += f" {comment}"
                    state.last.has_comment = True
                else:
                    state.emit(comment, has_comment=True)
                i = end
                continue

            if source.startswith("/*", i):
                end = source.find("*/", i + 2)
                end = n if end == -1 else end + 2
                state.append(source[i:end])
                i = end
                continue

            if ch == "\n":
                if state.buffered():
                    state.flush()
                else:
                    state.buf.clear()
                state.line_open = False
                state.newlines += 1
                if state.newlines >= 2:
                    state.pending_blank = True
                i += 1
                continue

            if ch in " \t\r\f\v":
                state.append_space()
                i += 1
                continue

            if ch == "{":
                close = source.find("}", i + 1)
                inner = source[i + 1:close] if close != -1 else ""
                if close != -1 and "{" not in inner and _ACCESSOR_LIST_RE.match(inner):
                    accessors = " ".join(f"{kw};" for kw in _ACCESSOR_RE.findall(inner))
                    if not state.buffered() and state.can_attach_brace():
                        state.last.text += f" {{ {accessors} }}"
                        state.touch()
                    else:
                        state.append_space()
                        state.append(f"{{ {accessors} }}")
                    i = close + 1
                    continue
                state.open_brace()
                i += 1
                continue

            if ch == "}":
                state.close_brace()
                i += 1
                continue

            if ch == "(":
                state.parens += 1
            elif ch == ")":
                state.parens = max(state.parens - 1, 0)

            state.append(ch)
            if ch == ";" and state.parens == 0:
                state.flush()
            i += 1

        state.flush()
        result = _join(state.lines, self.config.indent_unit)
        logger.debug("Formatted %d characters into %d lines", n, len(state.lines))
        return result


def format_source(source: str, config: FormatterConfig | None = None) -> str:
    """Format *source* with a one-off ``SourceFormatter``."""
    return SourceFormatter(config).format(source)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _is_verbatim_prefix(buf: list[str]) -> bool:
    """True when the characters just before a quote contain ``@`` (``@"``, ``$@"``)."""
    tail = "".join(buf[-2:])
    prefix = ""
    for ch in reversed(tail):
        if ch not in "@$":
            break
        prefix = ch + prefix
    return "@" in prefix


def _scan_string(source: str, start: int, verbatim: bool) -> int:
    """Return the index just past the string literal opening at *start*."""
    i = start + 1
    n = len(source)
    while i < n:
        ch = source[i]
        if verbatim:
            if ch == '"':
                if i + 1 < n and source[i + 1] == '"':
                    i += 2
                    continue
                return i + 1
        else:
            if ch == "\\":
                i += 2
                continue
            if ch == '"':
                return i + 1
            if ch == "\n":
                return i
        i += 1
    return n


def _scan_char(source: str, start: int) -> int:
    """Return the index just past the char literal opening at *start*."""
    i = start + 1
    n = len(source)
    while i < n:
        ch = source[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "'":
            return i + 1
        if ch == "\n":
            return i
        i += 1
    return n


def _join(lines: list[_Line], unit: str) -> str:
    while lines and not lines[-1].text:
        lines.pop()
    return "\n".join(unit * line.level + line.text if line.text else "" for line in lines)
