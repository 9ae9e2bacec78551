"""Genome decoding: hex text → byte sequence.

The primary genome is validated strictly. The seed is cosmetic context (an
object id appended to decorrelate look-alike genomes), so a bad seed degrades
to no bytes instead of failing the render.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

_HEX_DIGITS_RE = re.compile(r"^[0-9a-fA-F]*$")


class MalformedHexError(ValueError):
    """Raised when a required hex string is not an even run of hex digits."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Malformed hex {text!r}: {reason}")


def _strip_prefix(text: str) -> str:
    clean = text.strip()
    if clean[:2].lower() == "0x":
        return clean[2:]
    return clean


def decode_hex(text: str) -> bytes:
    """Decode ``[0x]<hex digits>`` into bytes. Empty input → ``b""``."""
    digits = _strip_prefix(text)
    if not _HEX_DIGITS_RE.match(digits):
        raise MalformedHexError(text, "non-hex characters")
    if len(digits) % 2 != 0:
        raise MalformedHexError(text, f"odd digit count ({len(digits)})")
    return bytes(int(digits[i : i + 2], 16) for i in range(0, len(digits), 2))


def decode_seed(text: str | None) -> bytes:
    """Best-effort seed decoding. Never raises."""
    if not text:
        return b""
    try:
        return decode_hex(text)
    except MalformedHexError as e:
        logger.warning("Ignoring malformed seed: %s", e.reason)
        return b""


def genome_bytes(genome_hex: str, seed_hex: str | None = None) -> bytes:
    """Genome bytes followed by seed bytes."""
    return decode_hex(genome_hex) + decode_seed(seed_hex)


def encode_hex(data: bytes | list[int]) -> str:
    return "0x" + "".join(f"{b:02x}" for b in data)


def _to_number(value: Any) -> float:
    """Lenient numeric coercion for RPC byte lists.

    ``None`` and blank strings count as 0, and strings may carry a
    ``0x``/``0o``/``0b`` prefix. Anything else unparseable (including nested
    lists and dicts) is NaN.
    """
    if value is None:
        return 0.0
    if isinstance(value, (bool, int, float)):
        try:
            return float(value)
        except OverflowError:
            return math.inf
    if not isinstance(value, str):
        return math.nan
    text = value.strip()
    if not text:
        return 0.0
    if text[:2].lower() in ("0x", "0o", "0b"):
        try:
            return float(int(text, 0))
        except ValueError:
            return math.nan
        except OverflowError:
            return math.inf
    try:
        return float(text)
    except ValueError:
        return math.nan


def _finite_bytes(values: list[Any]) -> list[int]:
    out: list[int] = []
    for v in values:
        n = _to_number(v)
        if math.isfinite(n):
            out.append(int(n) & 0xFF)
    return out


def genome_hex_from_fields(fields: Mapping[str, Any] | None) -> str | None:
    """Pull the genome out of on-chain object fields.

    Chain RPCs return ``vector<u8>`` either as a ``0x`` string, a plain list
    of numbers, or wrapped as ``{"vec": [...]}``. Returns None when there is
    nothing usable.
    """
    if not fields:
        return None
    raw = fields.get("genome")
    if not raw:
        return None
    if isinstance(raw, str):
        return raw if raw.startswith("0x") else None
    if isinstance(raw, Mapping):
        raw = raw.get("vec")
    if isinstance(raw, list):
        data = _finite_bytes(raw)
        return encode_hex(data) if data else None
    return None
