"""
Prediction checksums.

A prediction is stamped with ``XXXXXXXX-YYYY``: the CRC-32 of
``"<digits joined by ','>|<seed>|<timestamp ms>"`` in 8 uppercase hex
digits, a dash, and the first 4 hex digits of the Adler-32 of the same
bytes. That format is displayed and stored by callers, so it must not
change.

These are integrity codes only; none of them is a cryptographic hash.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

import structlog

logger = structlog.get_logger(__name__)

CRC32_POLYNOMIAL = 0xEDB88320
ADLER32_MOD = 65521
FNV32_OFFSET_BASIS = 0x811C9DC5
FNV32_PRIME = 0x01000193

BytesLike = Union[str, bytes, bytearray]


def _build_crc32_table() -> tuple[int, ...]:
    table = []
    for i in range(256):
        c = i
        for _ in range(8):
            c = (CRC32_POLYNOMIAL ^ (c >> 1)) if c & 1 else (c >> 1)
        table.append(c)
    return tuple(table)


_CRC32_TABLE = _build_crc32_table()


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _hex8(value: int) -> str:
    return f"{value & 0xFFFFFFFF:08X}"


def crc32(data: BytesLike) -> str:
    """Reflected CRC-32 (IEEE), as 8 uppercase hex digits."""
    crc = 0xFFFFFFFF
    for byte in _as_bytes(data):
        crc = (crc >> 8) ^ _CRC32_TABLE[(crc ^ byte) & 0xFF]
    return _hex8(crc ^ 0xFFFFFFFF)


def adler32(data: BytesLike) -> str:
    """Adler-32, as 8 uppercase hex digits."""
    a, b = 1, 0
    for byte in _as_bytes(data):
        a = (a + byte) % ADLER32_MOD
        b = (b + a) % ADLER32_MOD
    return _hex8((b << 16) | a)


def fnv1a(data: BytesLike) -> str:
    """32-bit FNV-1a, as 8 uppercase hex digits."""
    h = FNV32_OFFSET_BASIS
    for byte in _as_bytes(data):
        h ^= byte
        h = (h * FNV32_PRIME) & 0xFFFFFFFF
    return _hex8(h)


@dataclass(frozen=True)
class ChecksumResult:
    """
    Checksums of one prediction payload.

    Attributes
    ----------
    crc32, adler32:
        8-hex uppercase codes of the payload.
    combined:
        ``crc32 + "-" + adler32[:4]``; the persisted/display form.
    full:
        ``crc32 + adler32 + fnv1a``; a longer signature for exports.
    timestamp:
        The millisecond timestamp embedded in the payload. Needed to verify.
    """

    crc32: str
    adler32: str
    combined: str
    full: str
    timestamp: int


def checksum_payload(digits: Sequence[int], seed: int, now_millis: int) -> str:
    return f"{','.join(str(int(d)) for d in digits)}|{int(seed)}|{int(now_millis)}"


def generate(digits: Sequence[int], seed: int, now_millis: int) -> ChecksumResult:
    """Checksum ``digits`` together with the generator seed and a capture timestamp."""
    payload = checksum_payload(digits, seed, now_millis)
    crc = crc32(payload)
    adler = adler32(payload)
    return ChecksumResult(
        crc32=crc,
        adler32=adler,
        combined=f"{crc}-{adler[:4]}",
        full=f"{crc}{adler}{fnv1a(payload)}",
        timestamp=int(now_millis),
    )


def verify(digits: Sequence[int], combined: str, seed: int, timestamp: int) -> bool:
    """
    Recompute the combined code for ``digits``/``seed``/``timestamp`` and compare.

    The timestamp must be the one captured when the checksum was generated
    (``Prediction.timestamp`` or ``ChecksumResult.timestamp``). Re-reading
    the clock here would make every verification fail.
    """
    expected = generate(digits, seed, timestamp).combined
    ok = expected == combined
    if not ok:
        logger.debug("checksum_mismatch", expected=expected, provided=combined, seed=seed)
    return ok
