"""Transaction digest parsing — Base58 decode and length check.

Sui transaction digests are the Base58 (Bitcoin alphabet) encoding of a
32-byte Blake2b hash, with no version byte and no checksum.
"""

from __future__ import annotations

from sui_readable.errors.ledger_errors import InvalidDigestError

DIGEST_LENGTH = 32
# Base58 of 32 bytes is at most 44 characters
MAX_DIGEST_CHARS = 44

_B58_ALPHABET = b"123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"


def base58_encode(payload: bytes) -> str:
    """Encode raw bytes to Base58 (no checksum)."""
    n = int.from_bytes(payload, "big")
    result: list[int] = []
    while n > 0:
        n, remainder = divmod(n, 58)
        result.append(_B58_ALPHABET[remainder])
    # Preserve leading zero bytes
    for byte in payload:
        if byte == 0:
            result.append(_B58_ALPHABET[0])
        else:
            break
    return bytes(reversed(result)).decode("ascii")


def base58_decode(s: str) -> bytes:
    """Decode Base58 string to raw bytes (no checksum).

    Raises:
        ValueError: If *s* contains a character outside the Base58 alphabet.
    """
    n = 0
    for char in s:
        index = _B58_ALPHABET.find(char.encode("utf-8"))
        if index < 0:
            msg = f"Invalid Base58 character: {char!r}"
            raise ValueError(msg)
        n = n * 58 + index
    result = n.to_bytes((n.bit_length() + 7) // 8, "big") if n > 0 else b""
    # Preserve leading '1' chars as 0x00 bytes
    pad_count = 0
    for char in s:
        if char == "1":
            pad_count += 1
        else:
            break
    return b"\x00" * pad_count + result


def parse_digest(digest: str) -> bytes:
    """Parse a transaction digest string into its 32 raw bytes.

    Args:
        digest: Base58-encoded transaction digest.

    Returns:
        The decoded 32-byte digest.

    Raises:
        InvalidDigestError: If the string is empty, not Base58, or does not
            decode to exactly 32 bytes.
    """
    if not digest:
        msg = "Invalid transaction digest format: digest is empty"
        raise InvalidDigestError(msg)
    if len(digest) > MAX_DIGEST_CHARS:
        msg = (
            "Invalid transaction digest format: "
            f"expected at most {MAX_DIGEST_CHARS} characters, got {len(digest)}"
        )
        raise InvalidDigestError(msg)
    try:
        raw = base58_decode(digest)
    except ValueError as exc:
        msg = f"Invalid transaction digest format: {exc}"
        raise InvalidDigestError(msg) from exc
    if len(raw) != DIGEST_LENGTH:
        msg = (
            "Invalid transaction digest format: "
            f"expected {DIGEST_LENGTH} bytes, got {len(raw)}"
        )
        raise InvalidDigestError(msg)
    return raw
