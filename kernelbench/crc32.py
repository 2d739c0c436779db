"""The 32-bit frame check sequence of ANSI X3.66 (reflected polynomial 0xEDB88320)."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice

POLYNOMIAL = 0xEDB88320
MASK32 = 0xFFFFFFFF
PSEUDO_LENGTH = 1024
EXPECTED_RESULT = 11433

_RAND_MODULUS_MASK = (1 << 31) - 1


def _make_table() -> tuple[int, ...]:
    table = []
    for byte in range(256):
        value = byte
        for _ in range(8):
            value = (value >> 1) ^ POLYNOMIAL if value & 1 else value >> 1
        table.append(value)
    return tuple(table)


CRC_TABLE = _make_table()


def crc32_update(octet: int, crc: int) -> int:
    """Feed one byte into the CRC shift register and return the new register."""
    return CRC_TABLE[(crc ^ octet) & 0xFF] ^ ((crc & MASK32) >> 8)


def crc32(data: Iterable[int], crc: int = 0) -> int:
    """Return the CRC-32 of data, continuing from a previous checksum crc."""
    register = (crc ^ MASK32) & MASK32
    for octet in data:
        register = crc32_update(octet, register)
    return register ^ MASK32


def rand_beebs(seed: int = 0) -> Iterator[int]:
    """Yield an endless, reproducible stream of pseudo-random values in [0, 32767]."""
    state = seed & _RAND_MODULUS_MASK
    while True:
        state = (state * 1103515245 + 12345) & _RAND_MODULUS_MASK
        yield state >> 16


def crc32_pseudo(seed: int = 0) -> int:
    """CRC-32 of the low bytes of the first 1024 pseudo-random values."""
    return crc32(value & 0xFF for value in islice(rand_beebs(seed), PSEUDO_LENGTH))


def run_benchmark(repeat: int) -> int:
    """Checksum the pseudo-random stream `repeat` times; return the CRC mod 32768."""
    if repeat < 1:
        raise ValueError("repeat must be at least 1")
    result = 0
    for _ in range(repeat):
        result = crc32_pseudo(0)
    return result % 32768


def verify_benchmark(result: int) -> bool:
    """A run is correct when it produced the known checksum residue."""
    return result == EXPECTED_RESULT