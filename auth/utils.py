"""
Utility functions for the auth module.

HTTP Basic Authentication credential framing (RFC 7617):

    header value = "Basic " + base64(utf8(username + ":" + password))

Note:
    Base64 is framing, not encryption. Anything produced here must travel
    over TLS to stay confidential.

LLM Prompt Example:
    "Show how to encode and decode an HTTP Basic Authorization header in Python
    without silently truncating passwords that contain colons."
"""

import base64
import binascii
from typing import Tuple

SCHEME = "Basic"


class MalformedHeaderError(ValueError):
    """Raised when an Authorization header value cannot be decoded."""


def encode_credentials(username: str, password: str) -> str:
    """
    Build a Basic Authentication header value from a username and password.

    No escaping is applied: a colon inside the username cannot be told apart
    from the separator once encoded.

    Args:
        username (str): Account name.
        password (str): Stored credential presented by the client.

    Returns:
        str: e.g. "Basic am9obi5kb2U6VmVyeVNlY3JldCE=".
    """
    raw = f"{username}:{password}".encode("utf-8")
    return f"{SCHEME} {base64.b64encode(raw).decode('ascii')}"


def decode_credentials(header_value: str) -> Tuple[str, str]:
    """
    Split a Basic Authentication header value back into (username, password).

    Rules:
        - Everything up to the first space is the scheme and is discarded.
        - The remainder must be strict base64 of UTF-8 text.
        - The text is split on the first colon only, so the password keeps
          any further colons.

    Raises:
        MalformedHeaderError: No space, invalid base64/UTF-8, or no colon.
    """
    _scheme, sep, encoded = header_value.partition(" ")
    if not sep:
        raise MalformedHeaderError("Authorization header has no scheme separator")

    try:
        decoded = base64.b64decode(encoded.strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise MalformedHeaderError("Authorization header is not valid base64") from exc

    username, sep, password = decoded.partition(":")
    if not sep:
        raise MalformedHeaderError("Decoded credentials contain no ':' separator")
    return username, password
