import logging
from typing import List, NamedTuple

from voc import config
from voc.errors import FilesystemError

logger = logging.getLogger(__name__)

SEPARATOR = b":"
TERMINATOR = b"\n"


class Entry(NamedTuple):
    word: str
    definition: str

    @property
    def is_degenerate(self):
        """Blank or one-character words are not real entries."""
        return len(self.word) <= 1


def _decode(raw, encoding):
    return raw.decode(encoding, errors="surrogateescape")


def _encode(text, encoding):
    return text.encode(encoding, errors="surrogateescape")


def parse_entries(data: bytes, encoding=None) -> List[Entry]:
    """Split a vocabulary file's bytes into ordered word/definition entries.

    Every record ends with a newline; whatever follows the last newline is
    an unfinished record and is dropped. The word stops at the first colon
    of the line, so a definition may itself contain colons. A line without
    any colon is kept as a word with an empty definition.
    """
    encoding = encoding or config.ENCODING
    entries = []
    lines = data.split(TERMINATOR)
    # the piece after the last terminator never forms a record
    for lineno, line in enumerate(lines[:-1], 1):
        word, sep, definition = line.partition(SEPARATOR)
        if not sep:
            logger.debug("line %d has no separator, empty definition", lineno)
        entries.append(Entry(_decode(word, encoding), _decode(definition, encoding)))
    if lines[-1]:
        logger.debug("ignoring %d trailing bytes without newline", len(lines[-1]))
    return entries


def format_entries(entries, encoding=None) -> bytes:
    """Serialize entries back to ``word:definition`` lines."""
    encoding = encoding or config.ENCODING
    chunks = []
    for entry in entries:
        word = _encode(entry.word, encoding)
        definition = _encode(entry.definition, encoding)
        if SEPARATOR in word or TERMINATOR in word or TERMINATOR in definition:
            raise ValueError(f"entry cannot be written as a record: {entry!r}")
        chunks.append(word + SEPARATOR + definition + TERMINATOR)
    return b"".join(chunks)


def read_entries(path, encoding=None) -> List[Entry]:
    """Read a whole vocabulary file and parse it."""
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise FilesystemError(path, e.strerror or str(e), op="open") from e
    entries = parse_entries(data, encoding)
    logger.debug("parsed %d entries from %s", len(entries), path)
    return entries
