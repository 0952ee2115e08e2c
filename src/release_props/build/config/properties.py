"""
Property file loading.

Reads newline-delimited key/value files such as ``key.properties`` and
``keys.properties``. A missing file is not an error: it yields an empty
mapping. Malformed lines are skipped with a warning and recorded on the
returned PropertyFile; pass ``strict=True`` to raise instead.

Syntax follows java.util.Properties:

    # comment            ! also a comment
    storePassword=secret
    keyAlias: upload
    keyPassword secret
    long.value = first \\
                 second
"""
import logging
import re
from pathlib import Path
from string import hexdigits
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .exceptions import PropertyParseException
from .models import ParseIssue, PropertyEntry, PropertyFile

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "iso-8859-1"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_BLANKS = " \t\f"
_SEPARATORS = "=:"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


class _MalformedLine(ValueError):
    pass


def _continues(line: str) -> bool:
    """True if the line ends with an odd number of backslashes."""
    count = len(line) - len(line.rstrip("\\"))
    return count % 2 == 1


def _logical_lines(text: str) -> Iterable[Tuple[int, str]]:
    """Yield (first line number, logical line) with continuations joined."""
    lines = _LINE_BREAK.split(text)
    i = 0
    while i < len(lines):
        line_number = i + 1
        line = lines[i].lstrip(_BLANKS)
        i += 1
        if not line or line[0] in "#!":
            continue
        while _continues(line):
            line = line[:-1]
            if i >= len(lines):
                break
            line += lines[i].lstrip(_BLANKS)
            i += 1
        yield line_number, line


def _unescape(text: str) -> str:
    out = []
    i = 0
    while i < len(text):
        char = text[i]
        i += 1
        if char != "\\":
            out.append(char)
            continue
        if i >= len(text):
            break
        char = text[i]
        i += 1
        if char == "u":
            digits = text[i:i + 4]
            if len(digits) != 4 or any(d not in hexdigits for d in digits):
                raise _MalformedLine(f"invalid \\u escape '\\u{digits}'")
            out.append(chr(int(digits, 16)))
            i += 4
        else:
            out.append(_ESCAPES.get(char, char))
    return "".join(out)


def _split_line(line: str) -> Tuple[str, str]:
    """Split a logical line into raw (still escaped) key and value."""
    i = 0
    key_end = None
    has_separator = False
    while i < len(line):
        char = line[i]
        if char == "\\":
            i += 2
            continue
        if char in _SEPARATORS:
            key_end = i
            has_separator = True
            i += 1
            break
        if char in _BLANKS:
            key_end = i
            break
        i += 1

    if key_end is None:
        raise _MalformedLine("missing separator")

    while i < len(line) and line[i] in _BLANKS:
        i += 1
    if not has_separator and i < len(line) and line[i] in _SEPARATORS:
        has_separator = True
        i += 1
        while i < len(line) and line[i] in _BLANKS:
            i += 1

    key, value = line[:key_end], line[i:]
    if not key:
        raise _MalformedLine("empty key")
    if not has_separator and not value:
        raise _MalformedLine("missing separator")
    return key, value


def parse_properties(text: str, source: Union[str, Path] = "<string>",
                     strict: bool = False) -> Tuple[List[PropertyEntry], List[ParseIssue]]:
    """
    Parse property file text.

    Args:
        text: File contents
        source: Name used in log messages and exceptions
        strict: Raise on the first malformed line instead of skipping it

    Returns:
        Tuple of (entries in file order, issues for skipped lines)

    Raises:
        PropertyParseException: If strict and a line is malformed
    """
    entries = []
    issues = []
    for line_number, line in _logical_lines(text):
        try:
            raw_key, raw_value = _split_line(line)
            key, value = _unescape(raw_key), _unescape(raw_value)
        except _MalformedLine as e:
            if strict:
                raise PropertyParseException(
                    f"Malformed line {line_number} in {source}: {e}",
                    path=str(source),
                    line_number=line_number,
                    line=line
                )
            # Values may be secrets; only the reason is logged.
            logger.warning(f"Skipping malformed line {line_number} in {source}: {e}")
            issues.append(ParseIssue(line_number=line_number, line=line, reason=str(e)))
            continue
        entries.append(PropertyEntry(key=key, value=value, line_number=line_number))
    return entries, issues


def read_property_file(path: Union[str, Path], strict: bool = False,
                       encoding: str = DEFAULT_ENCODING) -> PropertyFile:
    """
    Read a property file.

    A missing file yields an empty PropertyFile with ``exists`` set to False.

    Raises:
        PropertyParseException: If strict and a line is malformed
    """
    path = Path(path)
    if not path.exists():
        logger.debug(f"Property file not found: {path}")
        return PropertyFile(path=path, exists=False)

    with open(path, "r", encoding=encoding, newline="") as f:
        text = f.read()

    entries, issues = parse_properties(text, source=path, strict=strict)
    logger.debug(f"Loaded {len(entries)} properties from {path}")
    return PropertyFile(path=path, exists=True, entries=entries, issues=issues)


def load(path: Union[str, Path], strict: bool = False) -> Dict[str, str]:
    """Load a property file into a mapping; a missing file gives {}."""
    return read_property_file(path, strict=strict).as_dict()


def load_all(paths: Iterable[Union[str, Path]], strict: bool = False) -> Dict[str, str]:
    """Load several property files; later files override earlier ones."""
    merged = {}
    for path in paths:
        merged.update(load(path, strict=strict))
    return merged


def get(mapping: Dict[str, str], key: str, default: Optional[str] = None) -> Optional[str]:
    """Look up a property, returning default when it is absent."""
    return mapping.get(key, default)
