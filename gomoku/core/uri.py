"""
Text form of game records: ``gomoku://<base64url>/``.

The trailing slash lets a truncated copy of a URI be told apart from a
complete one.
"""
import base64
import binascii
import re

from .codec import decode_record, encode_record
from .errors import InvalidURIError
from .game import GameRecord

URI_PREFIX = "gomoku://"
URI_SUFFIX = "/"

_BODY_RE = re.compile(r"[A-Za-z0-9_-]*={0,2}")


def to_uri(data: bytes) -> str:
    """Wrap an encoded buffer as a game URI."""
    body = base64.urlsafe_b64encode(bytes(data)).decode("ascii")
    return f"{URI_PREFIX}{body}{URI_SUFFIX}"


def from_uri(text: str) -> bytes:
    """
    Unwrap a game URI into the encoded buffer.

    Surrounding whitespace is ignored and missing ``=`` padding is accepted.

    Raises:
        InvalidURIError: If the prefix or the trailing slash is missing, or
            the body is not base64url
    """
    text = text.strip()
    if not text.startswith(URI_PREFIX):
        raise InvalidURIError(f"a game URI must start with {URI_PREFIX!r}")
    body = text[len(URI_PREFIX):]
    if not body.endswith(URI_SUFFIX):
        raise InvalidURIError(
            f"a game URI must end with {URI_SUFFIX!r} after the {URI_PREFIX!r} prefix")
    body = body[:-len(URI_SUFFIX)]

    if not _BODY_RE.fullmatch(body):
        raise InvalidURIError("game URI body is not base64url")
    body = body.rstrip("=")
    if len(body) % 4 == 1:
        raise InvalidURIError("game URI body has an invalid length")
    body += "=" * (-len(body) % 4)
    try:
        return base64.b64decode(body, altchars=b"-_", validate=True)
    except binascii.Error as e:
        raise InvalidURIError(f"base64 decoding failed: {e}") from e


def export_uri(record: GameRecord) -> str:
    return to_uri(encode_record(record))


def import_uri(text: str) -> GameRecord:
    """
    Decode a game URI into a fresh record.

    Raises:
        CorruptInputError: If the URI or the record inside it is invalid
    """
    return decode_record(from_uri(text))
