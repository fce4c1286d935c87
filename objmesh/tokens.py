"""Low-level tokenising of OBJ and MTL lines."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from objmesh.types import TextureType

_POW_LUT = (1.0, 0.1, 0.01, 0.001, 0.0001, 0.00001, 0.000001, 0.0000001)
_ATOI_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_FIELD_END = "/ \t\r"
_TOKEN_END = " \t\r"
_SPACES = " \t"

_TEXTURE_TYPES = (
    ("cube_top", TextureType.CUBE_TOP),
    ("cube_bottom", TextureType.CUBE_BOTTOM),
    ("cube_left", TextureType.CUBE_LEFT),
    ("cube_right", TextureType.CUBE_RIGHT),
    ("cube_front", TextureType.CUBE_FRONT),
    ("cube_back", TextureType.CUBE_BACK),
    ("sphere", TextureType.SPHERE),
)


def _is_digit(ch: str) -> bool:
    return len(ch) == 1 and "0" <= ch <= "9"


def _atoi(text: str, pos: int) -> int:
    match = _ATOI_RE.match(text, pos)
    return int(match.group(1)) if match else 0


def try_parse_double(text: str) -> float | None:
    """Parse a leading decimal number greedily; return None if there is none.

    Accepts ``[sign] digits ["." digits] [("e"|"E") [sign] digits]``; anything
    after the number is ignored.
    """
    n = len(text)
    if n == 0:
        return None
    i = 0
    sign = 1.0
    if text[0] in "+-":
        sign = -1.0 if text[0] == "-" else 1.0
        i += 1
    elif not _is_digit(text[0]):
        return None

    mantissa = 0.0
    read = 0
    while i < n and _is_digit(text[i]):
        mantissa = mantissa * 10 + (ord(text[i]) - 48)
        i += 1
        read += 1
    if read == 0:
        return None

    exponent = 0
    if i < n and text[i] == ".":
        i += 1
        read = 1
        while i < n and _is_digit(text[i]):
            scale = _POW_LUT[read] if read < len(_POW_LUT) else 10.0 ** -read
            mantissa += (ord(text[i]) - 48) * scale
            read += 1
            i += 1

    if i < n and text[i] in "eE":
        i += 1
        exp_sign = 1
        if i < n and text[i] in "+-":
            exp_sign = -1 if text[i] == "-" else 1
            i += 1
        elif not (i < n and _is_digit(text[i])):
            return None
        read = 0
        while i < n and _is_digit(text[i]):
            exponent = exponent * 10 + (ord(text[i]) - 48)
            i += 1
            read += 1
        exponent *= exp_sign
        if read == 0:
            return None

    if not exponent or mantissa == 0.0:
        return sign * mantissa
    try:
        value = math.ldexp(mantissa * 5.0 ** exponent, exponent)
    except OverflowError:
        value = math.inf
    return sign * value


def fix_index(idx: int, n: int) -> int:
    """Turn a one-based or negative (relative) OBJ index into a zero-based one."""
    if idx > 0:
        return idx - 1
    if idx == 0:
        raise ValueError("face index 0 is not allowed")
    return n + idx


@dataclass(frozen=True)
class VertexIndex:
    """Zero-based position, texcoord and normal indices of one face corner."""

    v_idx: int = -1
    vt_idx: int = -1
    vn_idx: int = -1


@dataclass
class Cursor:
    """A read position within one line of text."""

    text: str
    pos: int = 0

    def _char(self, offset: int = 0) -> str:
        i = self.pos + offset
        if 0 <= i < len(self.text):
            return self.text[i]
        return "\0"

    def _span(self, chars: str) -> int:
        i = self.pos
        while i < len(self.text) and self.text[i] in chars:
            i += 1
        return i

    def _cspan(self, chars: str) -> int:
        i = self.pos
        while i < len(self.text) and self.text[i] not in chars and self.text[i] != "\0":
            i += 1
        return i

    def _skip_field(self) -> None:
        self.pos = self._cspan(_FIELD_END)

    def skip_space(self) -> None:
        """Move past spaces and tabs."""
        self.pos = self._span(_SPACES)

    def at_line_end(self) -> bool:
        """True at a carriage return, newline, NUL or the end of the text."""
        return self._char() in "\r\n\0"

    def rest(self) -> str:
        """The text from the current position to the end of the line."""
        return self.text[self.pos:].split("\0", 1)[0]

    def startswith_keyword(self, keyword: str) -> bool:
        """True if ``keyword`` followed by a space or tab starts here."""
        return self.text.startswith(keyword, self.pos) and self._char(len(keyword)) in _SPACES

    def advance(self, count: int) -> None:
        """Move forward by ``count`` characters, stopping at the end."""
        self.pos = min(self.pos + count, len(self.text))

    def parse_string(self) -> str:
        """Read one whitespace-delimited word."""
        self.skip_space()
        end = self._cspan(_TOKEN_END)
        word = self.text[self.pos:end]
        self.pos = end
        return word

    def parse_int(self) -> int:
        """Read an integer the way ``atoi`` does; 0 when there is none."""
        self.skip_space()
        value = _atoi(self.text, self.pos)
        self.pos = self._cspan(_TOKEN_END)
        return value

    def try_parse_real(self) -> float | None:
        """Read a number from the next word, or None; the word is consumed."""
        self.skip_space()
        end = self._cspan(_TOKEN_END)
        value = try_parse_double(self.text[self.pos:end])
        self.pos = end
        return value

    def parse_real(self, default: float = 0.0) -> float:
        """Read a number from the next word, falling back to ``default``."""
        value = self.try_parse_real()
        return default if value is None else value

    def parse_on_off(self, default: bool = True) -> bool:
        """Read an ``on``/``off`` switch."""
        self.skip_space()
        end = self._cspan(_TOKEN_END)
        result = default
        if self.text.startswith("on", self.pos):
            result = True
        elif self.text.startswith("off", self.pos):
            result = False
        self.pos = end
        return result

    def parse_texture_type(self, default: TextureType = TextureType.NONE) -> TextureType:
        """Read the argument of a ``-type`` texture option."""
        self.skip_space()
        end = self._cspan(_TOKEN_END)
        result = default
        for prefix, texture_type in _TEXTURE_TYPES:
            if self.text.startswith(prefix, self.pos):
                result = texture_type
                break
        self.pos = end
        return result

    def parse_tag_triple(self) -> tuple[int, int, int]:
        """Read ``ints[/reals[/strings]]`` counts of a tag statement."""
        self.skip_space()
        num_ints = _atoi(self.text, self.pos)
        self._skip_field()
        if self._char() != "/":
            return num_ints, 0, 0
        self.pos += 1
        self.skip_space()
        num_reals = _atoi(self.text, self.pos)
        self._skip_field()
        if self._char() != "/":
            return num_ints, num_reals, 0
        self.pos += 1
        return num_ints, num_reals, self.parse_int()

    def parse_triple(self, vsize: int, vnsize: int, vtsize: int) -> VertexIndex:
        """Read ``i``, ``i/j``, ``i//k`` or ``i/j/k`` as zero-based indices.

        Raises ValueError on an index of zero.
        """
        v = fix_index(_atoi(self.text, self.pos), vsize)
        self._skip_field()
        if self._char() != "/":
            return VertexIndex(v)
        self.pos += 1

        if self._char() == "/":
            self.pos += 1
            vn = fix_index(_atoi(self.text, self.pos), vnsize)
            self._skip_field()
            return VertexIndex(v, vn_idx=vn)

        vt = fix_index(_atoi(self.text, self.pos), vtsize)
        self._skip_field()
        if self._char() != "/":
            return VertexIndex(v, vt)

        self.pos += 1
        vn = fix_index(_atoi(self.text, self.pos), vnsize)
        self._skip_field()
        return VertexIndex(v, vt, vn)

    def parse_raw_triple(self) -> VertexIndex:
        """Read a face corner keeping the raw values; missing parts are 0."""
        v = _atoi(self.text, self.pos)
        vt = 0
        vn = 0
        self._skip_field()
        if self._char() != "/":
            return VertexIndex(v, vt, vn)
        self.pos += 1

        if self._char() == "/":
            self.pos += 1
            vn = _atoi(self.text, self.pos)
            self._skip_field()
            return VertexIndex(v, vt, vn)

        vt = _atoi(self.text, self.pos)
        self._skip_field()
        if self._char() != "/":
            return VertexIndex(v, vt, vn)

        self.pos += 1
        vn = _atoi(self.text, self.pos)
        self._skip_field()
        return VertexIndex(v, vt, vn)