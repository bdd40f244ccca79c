"""
Persistent key/value store for Quelea.

Reads and writes a flat ``key=value`` properties file. The format is the
one produced by earlier Quelea releases, so existing user files load
unchanged.
"""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Tuple

logger = logging.getLogger(__name__)

HEADER_COMMENT = "Auto save"

_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_KEY_SPECIALS = {"=": "\\=", ":": "\\:", "#": "\\#", "!": "\\!", " ": "\\ "}
_WHITESPACE = " \t\f"


class StorageError(Exception):
    """Raised when the properties file cannot be read or written."""
    pass


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def _ends_with_continuation(line: str) -> bool:
    slashes = len(line) - len(line.rstrip("\\"))
    return slashes % 2 == 1


def _logical_lines(lines: Iterable[str]) -> Iterator[str]:
    """Join backslash-continued physical lines, skipping comments."""
    pending = None
    for raw in lines:
        line = raw.rstrip("\r\n")
        if pending is not None:
            line = pending + line.lstrip(_WHITESPACE)
            pending = None
        elif not line.strip(_WHITESPACE) or line.lstrip(_WHITESPACE)[0] in "#!":
            continue

        if _ends_with_continuation(line):
            pending = line[:-1]
            continue
        yield line.lstrip(_WHITESPACE)

    if pending is not None:
        yield pending.lstrip(_WHITESPACE)


def _unescape(text: str) -> str:
    out: List[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch != "\\" or i + 1 >= len(text):
            out.append(ch)
            i += 1
            continue

        nxt = text[i + 1]
        if nxt == "u":
            digits = text[i + 2:i + 6]
            if len(digits) != 4:
                raise ValueError(f"Malformed \\uxxxx escape: {text!r}")
            out.append(chr(int(digits, 16)))
            i += 6
        else:
            out.append(_ESCAPES.get(nxt, nxt))
            i += 2
    return "".join(out)


def _split_entry(line: str) -> Tuple[str, str]:
    """Split a logical line into raw (still escaped) key and value."""
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == "\\":
            i += 2
            continue
        if ch in "=:" or ch in _WHITESPACE:
            break
        i += 1

    key = line[:i]
    rest = line[i:].lstrip(_WHITESPACE)
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip(_WHITESPACE)
    return key, rest


def parse_properties(lines: Iterable[str]) -> Dict[str, str]:
    """
    Parse properties file content.

    Args:
        lines: Physical lines of the file

    Returns:
        Mapping of key to value, in file order

    Raises:
        ValueError: On a malformed unicode escape
    """
    entries: Dict[str, str] = {}
    for line in _logical_lines(lines):
        key, value = _split_entry(line)
        entries[_unescape(key)] = _unescape(value)
    return entries


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------

def _escape(text: str, is_key: bool) -> str:
    out: List[str] = []
    for index, ch in enumerate(text):
        if ch == "\\":
            out.append("\\\\")
        elif ch == "\t":
            out.append("\\t")
        elif ch == "\n":
            out.append("\\n")
        elif ch == "\r":
            out.append("\\r")
        elif ch == "\f":
            out.append("\\f")
        elif is_key and ch in _KEY_SPECIALS:
            out.append(_KEY_SPECIALS[ch])
        elif ch == " " and index == 0:
            out.append("\\ ")
        else:
            out.append(ch)
    return "".join(out)


def format_properties(entries: Dict[str, str], comment: str = HEADER_COMMENT) -> str:
    """
    Render entries as properties file content.

    Args:
        entries: Mapping to serialize, written in iteration order
        comment: Text for the leading comment line

    Returns:
        File content ending with a newline
    """
    lines = [
        f"#{comment}",
        f"#{datetime.now().astimezone().strftime('%a %b %d %H:%M:%S %Z %Y')}",
    ]
    for key, value in entries.items():
        lines.append(f"{_escape(key, True)}={_escape(value, False)}")
    return "\n".join(lines) + "\n"


# ---------------------------------------------------------------------------
# File store
# ---------------------------------------------------------------------------

class PropertyStore:
    """
    Backing file for Quelea properties.

    The store has no locking; it assumes it is the only writer of its
    file.
    """

    def __init__(self, path: Path):
        """
        Initialize the store.

        Args:
            path: Location of the properties file
        """
        self.path = Path(path)

    def read_file(self) -> Dict[str, str]:
        """
        Read and parse the backing file.

        Raises:
            StorageError: If the file can't be read or parsed
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return parse_properties(f)
        except (OSError, UnicodeDecodeError, ValueError) as e:
            raise StorageError(f"Couldn't read {self.path}: {e}") from e

    def write_file(self, entries: Dict[str, str]):
        """
        Overwrite the backing file with entries.

        The data is flushed and synced to disk before returning.

        Raises:
            StorageError: If the file can't be written
        """
        content = format_properties(entries)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
        except OSError as e:
            raise StorageError(f"Couldn't write {self.path}: {e}") from e

    def load(self) -> Dict[str, str]:
        """
        Load all entries.

        A missing file is created empty. Any failure is logged and an empty
        mapping returned, so callers fall back to defaults.

        Returns:
            Mapping of key to value
        """
        try:
            if not self.path.exists():
                logger.info(f"No properties file found, creating {self.path}")
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.touch()
                return {}

            entries = self.read_file()
            logger.info(f"Loaded {len(entries)} properties from {self.path}")
            return entries

        except (StorageError, OSError) as e:
            logger.error(f"Couldn't load properties: {e}, using defaults")
            return {}

    def write(self, entries: Dict[str, str]):
        """
        Persist all entries, replacing the file contents.

        Failures are logged; the caller's in-memory values stay in effect.
        """
        try:
            self.write_file(entries)
            logger.debug(f"Saved properties to {self.path}")
        except StorageError as e:
            logger.error(f"Couldn't store properties: {e}")
