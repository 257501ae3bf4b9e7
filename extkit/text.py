from __future__ import annotations

import re
import logging
import typing
import warnings
from .types import *
from .config import DEFAULTS

if typing.TYPE_CHECKING:
    from .ordered_map import OrderedMap

logger = logging.getLogger(__name__)

_UNDERSCORE_LETTER = re.compile(r'_([^\W\d_])')

TextLike = Union[str, 'TextValue']


def _unwrap_delimited(source: str, delimiter: str) -> Tuple[str, int]:
    """split '/body/flags' into (body, re flags). anything else is taken as a bare pattern"""
    end = source.rfind(delimiter)
    if len(source) < 2 or not source.startswith(delimiter) or end == 0:
        return source, 0
    suffix = source[end + len(delimiter):]
    if any(letter not in DEFAULTS.regex_flags for letter in suffix):
        return source, 0
    flags = 0
    for letter in suffix:
        flags |= DEFAULTS.regex_flags[letter]
    return source[len(delimiter):end], flags


def try_compile(candidate: TextLike, delimiter: str = DEFAULTS.regex_delimiter) -> CompileResult:
    """
    try to compile candidate as a python regular expression.

    a slash-delimited candidate such as '/^abc$/i' is compiled as '^abc$' with
    the trailing flags applied. compile errors are caught and reported through
    the returned CompileResult, never raised. warnings re emits while parsing
    (nested sets and the like) are silenced for the duration of the attempt.

    this is only a syntactic check: plain words like 'abc' compile fine and so
    count as patterns.
    """
    source = str(candidate)
    body, flags = _unwrap_delimited(source, delimiter)
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            pattern = re.compile(body, flags)
        return CompileResult(source, pattern=pattern)
    except (re.error, OverflowError, RecursionError, Warning) as e:
        logger.debug(f"not a usable pattern: {source!r} ({e})")
        return CompileResult(source, error=str(e))


class TextValue:
    """an immutable piece of text with chainable transformations"""

    __slots__ = ('_text',)

    def __init__(self, text: TextLike = ''):
        if isinstance(text, TextValue):
            text = text._text
        if not isinstance(text, str):
            raise TypeError(f"TextValue needs a str, got {type(text).__name__}")
        self._text = text

    # --- replacement ---

    def replace(self, search: Union[TextLike, Iterable[TextLike]],
                replacement: Union[TextLike, Iterable[TextLike]]) -> 'TextValue':
        """
        replace literal occurrences.

        - replace('a', 'x'): every 'a' becomes 'x'
        - replace(['a', 'b'], ['x', 'y']): all patterns in one pass over the original
          text, so a replacement is never matched again. where several patterns match
          at the same spot the one listed first wins. patterns without a matching
          replacement (short replacement list) are removed.
        - replace(['a', 'b'], 'z'): every pattern becomes 'z'

        empty patterns are ignored.
        """
        if isinstance(search, (str, TextValue)):
            if not isinstance(replacement, (str, TextValue)):
                raise TypeError("a single search string needs a single replacement string")
            search = str(search)
            if not search:
                return TextValue(self._text)
            return TextValue(self._text.replace(search, str(replacement)))

        patterns = [str(pattern) for pattern in search]
        if isinstance(replacement, (str, TextValue)):
            substitutes = [str(replacement)] * len(patterns)
        else:
            substitutes = [str(item) for item in replacement]

        table: Dict[str, str] = {}
        for index, pattern in enumerate(patterns):
            if pattern:
                table.setdefault(pattern, substitutes[index] if index < len(substitutes) else '')
        if not table:
            return TextValue(self._text)

        alternation = re.compile('|'.join(re.escape(pattern) for pattern in table))
        return TextValue(alternation.sub(lambda match: table[match.group(0)], self._text))

    def replace_before(self, search: TextLike, replacement: TextLike) -> 'TextValue':
        """replace everything in front of the first `search`, keeping `search` itself. no match gives self"""
        index = self._text.find(str(search))
        if index < 0:
            return self
        return TextValue(str(replacement) + self._text[index:])

    # --- splitting and searching ---

    def split(self, delimiter: TextLike) -> 'OrderedMap[int, TextValue]':
        """split on a literal delimiter into a 0-indexed map of TextValue pieces"""
        from .ordered_map import OrderedMap
        delimiter = str(delimiter)
        if not delimiter:
            raise ValueError("delimiter must not be empty")
        return OrderedMap(TextValue(piece) for piece in self._text.split(delimiter))

    def substring_after(self, search: TextLike) -> 'TextValue':
        """text after the first `search`. no match gives self"""
        search = str(search)
        index = self._text.find(search)
        if index < 0:
            return self
        return TextValue(self._text[index + len(search):])

    def substring_before(self, search: TextLike) -> 'TextValue':
        """text before the first `search`. no match gives self"""
        index = self._text.find(str(search))
        if index < 0:
            return self
        return TextValue(self._text[:index])

    def contains(self, search: TextLike) -> bool:
        return str(search) in self._text

    def start_with(self, search: TextLike) -> bool:
        """
        if `search` compiles as a pattern (see try_compile) it is matched at the start
        of the text with re.match, otherwise it is compared as a literal prefix.
        so start_with('a.c') is true for 'abc'.
        """
        result = try_compile(search)
        if result.ok:
            return result.pattern.match(self._text) is not None
        return self._text.startswith(str(search))

    def end_with(self, search: TextLike) -> bool:
        """literal suffix check"""
        return self._text.endswith(str(search))

    def is_regex(self) -> bool:
        """whether this text compiles as a pattern. a heuristic, 'abc' counts too"""
        return try_compile(self._text).ok

    # --- whitespace and case ---

    def trim(self) -> 'TextValue':
        return TextValue(self._text.strip())

    def to_lower_case(self) -> 'TextValue':
        return TextValue(self._text.lower())

    def to_upper_case(self) -> 'TextValue':
        return TextValue(self._text.upper())

    def to_camel_case(self) -> 'TextValue':
        """'_' + letter becomes the upper-cased letter. nothing else changes, 'Foo_bar' -> 'FooBar'"""
        return TextValue(_UNDERSCORE_LETTER.sub(lambda match: match.group(1).upper(), self._text))

    def to_snake_case(self) -> 'TextValue':
        """
        every upper-case letter becomes '_' + its lower-case form.
        separators are not collapsed and a leading one is kept: 'Hello' -> '_hello'.
        """
        return self._separate_upper('_')

    def to_kebab_case(self) -> 'TextValue':
        """like to_snake_case with '-': 'helloWorld' -> 'hello-world', 'Hello' -> '-hello'"""
        return self._separate_upper('-')

    def _separate_upper(self, separator: str) -> 'TextValue':
        return TextValue(''.join(separator + char.lower() if char.isupper() else char for char in self._text))

    # --- plumbing ---

    def length(self) -> int:
        return len(self._text)

    def is_empty(self) -> bool:
        return not self._text

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"TextValue({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextValue):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)
