"""
Challenge Codec

Turns a target word into a compact URL-safe token and back, so a puzzle can
be passed around in a link without spelling out the answer.
"""

import base64
import binascii
import re

_WORD_PATTERN = re.compile(r"[a-z]+")
_TOKEN_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


class ChallengeDecodeError(ValueError):
    """Raised when a challenge token is malformed or does not name a word."""


def encode_challenge(target: str) -> str:
    """Encodes a lowercase word as unpadded URL-safe base64."""
    if not _WORD_PATTERN.fullmatch(target):
        raise ValueError(f"Cannot encode challenge for '{target}': only lowercase letters allowed")
    return base64.urlsafe_b64encode(target.encode("ascii")).decode("ascii").rstrip("=")


def decode_challenge(token: str) -> str:
    """
    Decodes a challenge token back into its word.

    The result still has to be checked against the dictionary by the caller.

    Raises:
        ChallengeDecodeError: If the token is not valid base64 of a lowercase word
    """
    if not isinstance(token, str) or not _TOKEN_PATTERN.fullmatch(token):
        raise ChallengeDecodeError("Invalid challenge string")
    if len(token) % 4 == 1:
        raise ChallengeDecodeError("Invalid challenge string length")

    padded = token + "=" * (-len(token) % 4)
    try:
        raw = base64.b64decode(padded.encode("ascii"), altchars=b"-_", validate=True)
        word = raw.decode("ascii")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise ChallengeDecodeError("Invalid challenge string") from exc

    if not _WORD_PATTERN.fullmatch(word):
        raise ChallengeDecodeError("Challenge does not decode to a word")

    # Reject tokens with non-canonical trailing bits
    if encode_challenge(word) != token:
        raise ChallengeDecodeError("Invalid challenge string")

    return word
