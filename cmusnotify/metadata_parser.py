"""
Parser turning a cmus status response into a Metadata record.
"""

from typing import Dict, Optional, Union

from .metadata import MAX_SECONDS, MAX_TRACK_NUMBER, Metadata
from .module_registry import module_registry


class MetadataParsingError(Exception):
    """Base error for malformed status responses."""

    def __init__(self, message: str, line_number: int, line: str):
        super().__init__(f"line {line_number}: {message}: {line!r}")
        self.line_number = line_number
        self.line = line


class MalformedLineError(MetadataParsingError):
    """A record is missing the space separating its key from its value."""

    pass


class InvalidNumberError(MetadataParsingError):
    """A numeric field holds something other than an unsigned integer."""

    def __init__(self, message: str, line_number: int, line: str, field: str, value: str):
        super().__init__(message, line_number, line)
        self.field = field
        self.value = value


class NumberOutOfRangeError(InvalidNumberError):
    """A numeric field does not fit the range of its type."""

    pass


log = module_registry.register_module(
    name="parser",
    description="Status response parsing (keywords and tags)",
    logger_name="parser",
    debug_flag="--debug-parser",
)

# Top-level keywords and the limit of their numeric range, None for text
_KEYWORD_FIELDS: Dict[str, Optional[int]] = {
    "status": None,
    "file": None,
    "duration": MAX_SECONDS,
    "position": MAX_SECONDS,
}

_TAG_FIELDS: Dict[str, Optional[int]] = {
    "title": None,
    "artist": None,
    "album": None,
    "date": None,
    "tracknumber": MAX_TRACK_NUMBER,
    "discnumber": MAX_TRACK_NUMBER,
}


def _split_record(text: str, line_number: int, line: str):
    key, sep, value = text.partition(" ")
    if not sep:
        raise MalformedLineError("record has no value", line_number, line)
    return key, value


def _parse_unsigned(field: str, value: str, limit: int, line_number: int, line: str) -> int:
    # int() would also take signs, whitespace and underscores
    if not value or not (value.isascii() and value.isdigit()):
        raise InvalidNumberError(f"{field} is not an unsigned integer", line_number, line, field, value)

    number = int(value)
    if number > limit:
        raise NumberOutOfRangeError(f"{field} exceeds {limit}", line_number, line, field, value)
    return number


def _coerce(field: str, value: str, limit: Optional[int], line_number: int, line: str) -> Union[str, int]:
    if limit is None:
        return value
    return _parse_unsigned(field, value, limit, line_number, line)


def parse(text: str) -> Metadata:
    """
    Parse a status response into Metadata.

    Unknown keywords and tag names are skipped so newer cmus releases keep
    working. A known field with a bad value is an error.

    Args:
        text: Decoded response, optionally including the blank terminator line

    Returns:
        Metadata with defaults for every field the response did not set

    Raises:
        MetadataParsingError: If a record is malformed or a number is invalid
    """
    fields: Dict[str, Union[str, int]] = {}

    for line_number, raw_line in enumerate(text.split("\n"), start=1):
        line = raw_line.rstrip("\r")
        if not line:
            continue

        keyword, remainder = _split_record(line, line_number, line)

        if keyword == "tag":
            name, sep, value = remainder.partition(" ")
            if name not in _TAG_FIELDS:
                log.debug("Ignoring unknown tag: %s", name)
                continue
            if not sep:
                raise MalformedLineError("tag has no value", line_number, line)
            fields[name] = _coerce(name, value, _TAG_FIELDS[name], line_number, line)
        elif keyword in _KEYWORD_FIELDS:
            fields[keyword] = _coerce(keyword, remainder, _KEYWORD_FIELDS[keyword], line_number, line)
        else:
            log.debug("Ignoring unknown keyword: %s", keyword)

    log.debug("Parsed fields: %s", fields)
    return Metadata(**fields)
