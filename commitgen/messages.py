"""Commit message cleaning and validation."""

import re

from commitgen import COMMIT_TYPE_NAMES, MAX_MESSAGE_LENGTH

TYPES_PATTERN = '|'.join(COMMIT_TYPE_NAMES)

# type(scope): subject, on a single line
CONVENTIONAL_COMMIT_RE = re.compile(rf'({TYPES_PATTERN})(\([a-z0-9-]+\))?:\s*[^\r\n]+')

_LEADING_BACKTICKS = re.compile(r'^`+')
_TRAILING_BACKTICKS = re.compile(r'`+$')
_LEADING_QUOTE = re.compile(r'^["\']')
_TRAILING_QUOTE = re.compile(r'["\']$')
_TRAILING_ASTERISK = re.compile(r'\*$')


def _strip_backticks(text: str) -> str:
    return _TRAILING_BACKTICKS.sub('', _LEADING_BACKTICKS.sub('', text))


def _clean_once(text: str) -> str:
    text = _strip_backticks(text.strip())
    text = _LEADING_QUOTE.sub('', text)
    text = _TRAILING_QUOTE.sub('', text)
    text = text.replace('\n', ' ')
    text = _TRAILING_ASTERISK.sub('', text)
    return text.strip()


def clean_commit_message(text: str) -> str:
    """Strip the markdown and quoting models wrap around a one-line message.

    Wrappers can be nested (a quoted, backticked line), so the pass repeats
    until nothing changes.
    """
    cleaned = _clean_once(text)
    while True:
        again = _clean_once(cleaned)
        if again == cleaned:
            return cleaned
        cleaned = again


def validate_commit_message(message: str) -> bool:
    """Check that a message is a conventional commit of at most 72 chars."""
    cleaned = _strip_backticks(message.strip())

    if len(cleaned) > MAX_MESSAGE_LENGTH:
        return False

    return CONVENTIONAL_COMMIT_RE.fullmatch(cleaned) is not None
