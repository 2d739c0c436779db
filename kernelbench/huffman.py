"""Huffman compression and decompression of a byte string.

Codes are built from an indirect heap in the same order as the classic
array-based implementation, so ties between equal frequencies are broken
deterministically and the produced bit stream is reproducible.
"""

from __future__ import annotations

from collections.abc import Iterator

MAX_CODE_BITS = 64

ORIG_DATA = (
    b"J2OZF50FYL" b"D5UTVYYRMT" b"0VXO01VC5F" b"NIB1CG12MT" b"IPT2CIV00B"
    b"OUWFDRAYTA" b"3AI42KFXHR" b"KPA3LCGA3A" b"BLUYQXJRQ2" b"RN2ZMYERPL"
    b"C00CXFE3GB" b"3HMS53JIOZ" b"E5HBYTZ2EJ" b"HGDBI0HMYN" b"OVU0HUXR2F"
    b"KBERC3E1ZI" b"EBOHCWCJD0" b"WRPLLX5DI1" b"IS2NE4KI0D" b"R4E5GHWIQZ"
    b"CHKRSVIRYQ" b"MBDJOHHYPB" b"1AAAAGHWOX" b"PQ4ZBQOKBH" b"0OI3XWE4OU"
    b"AJUAJUGQKU" b"IZEGSFXBPY" b"IKGQH3GM2U" b"A23U2HJCXT" b"W5N0G553AP"
    b"VIZ2YAZ4MV" b"SMRQBNXKPO" b"3FOK5UK5RK" b"OGTHCLH2KU" b"R2ADMBQDLA"
    b"SJFATFU3EF" b"ISL1ZOGAKQ" b"U1NV4ZWP3C" b"PPLUP4ZD23" b"IEPT5IBFJL"
    b"W3HDSF2JUZ" b"LDIWYXUR0Q" b"PCU4WTHXZQ" b"DPNKSAPOJE" b"IUHQK5I4RC"
    b"PAFD41XFSQ" b"VV5D5RDP5M" b"THA0YK0AIL" b"CXLH1JCSPV" b"CEKBHKSKZR"
)

Codes = dict[int, tuple[int, int]]


class HuffmanError(ValueError):
    """Raised when data cannot be Huffman-coded or a bit stream cannot be decoded."""


def _heap_adjust(freq: list[int], heap: list[int], n: int, k: int) -> None:
    """Sift element k (1-based) down an inverse heap of n entries ordered by freq."""
    v = heap[k - 1]
    while k <= n // 2:
        j = k + k
        if j < n and freq[heap[j - 1]] > freq[heap[j]]:
            j += 1
        if freq[v] < freq[heap[j - 1]]:
            break
        heap[k - 1] = heap[j - 1]
        k = j
    heap[k - 1] = v


def huffman_codes(data: bytes) -> Codes:
    """Return {byte: (code, length)} for every byte value occurring in data.

    The code's most significant bit is the edge nearest the root. A byte
    that is the only value present gets the empty code (0, 0).
    """
    freq = [0] * 512
    for byte in data:
        freq[byte] += 1

    heap = [value for value in range(256) if freq[value]]
    n = len(heap)
    for i in range(n, 0, -1):
        _heap_adjust(freq, heap, n, i)

    link = [0] * 512
    while n > 1:
        n -= 1
        temp = heap[0]
        heap[0] = heap[n]
        _heap_adjust(freq, heap, n, 1)
        node = 256 + n
        freq[node] = freq[heap[0]] + freq[temp]
        link[temp] = node
        link[heap[0]] = -node
        heap[0] = node
        _heap_adjust(freq, heap, n, 1)
    link[256 + n] = 0

    codes: Codes = {}
    for value in range(256):
        if not freq[value]:
            continue
        length = 0
        bit = 1
        code = 0
        node = link[value]
        while node:
            if node < 0:
                code += bit
                node = -node
            node = link[node]
            bit <<= 1
            length += 1
        codes[value] = (code, length)
    return codes


def _code_bits(data: bytes, codes: Codes) -> Iterator[int]:
    for byte in data:
        code, length = codes[byte]
        for shift in range(length - 1, -1, -1):
            yield (code >> shift) & 1


def _encode(data: bytes) -> tuple[bytes, Codes]:
    codes = huffman_codes(data)
    if max((length for _, length in codes.values()), default=0) > MAX_CODE_BITS:
        raise HuffmanError(f"codes longer than {MAX_CODE_BITS} bits")
    if max((code for code, _ in codes.values()), default=0) == 0:
        raise HuffmanError("data holds fewer than two distinct byte values")

    value = 0
    total = 0
    for bit in _code_bits(data, codes):
        value = (value << 1) | bit
        total += 1
    if (total - 1) // 8 >= len(data):
        raise HuffmanError("compressed output would be longer than the input")
    pad = -total % 8
    value <<= pad
    return value.to_bytes((total + pad) // 8, "big"), codes


def compress(data: bytes) -> bytes:
    """Huffman-code data into a bit stream, most significant bit first.

    Raises HuffmanError for data with fewer than two distinct values, for
    codes too long for a machine word, and when the output would not be
    shorter than the input.
    """
    return _encode(bytes(data))[0]


def decompress(comp: bytes, codes: Codes, length: int) -> bytes:
    """Decode length bytes from the bit stream comp using codes."""
    table: dict[int, int] = {}
    for value, (code, clen) in codes.items():
        if not (code | clen):
            continue
        node = 0
        for shift in range(clen - 1, -1, -1):
            node = node * 2 + 1 + ((code >> shift) & 1)
        table[node] = value
    if length and not table:
        raise HuffmanError("no codes to decode with")
    limit = max(table, default=0)

    out = bytearray()
    node = 0
    bits = ((byte >> shift) & 1 for byte in comp for shift in range(7, -1, -1))
    for bit in bits:
        if len(out) >= length:
            break
        node = node * 2 + 1 + bit
        symbol = table.get(node)
        if symbol is not None:
            out.append(symbol)
            node = 0
        elif node > limit:
            raise HuffmanError("bit stream does not match the codes")
    if len(out) < length:
        raise HuffmanError("bit stream ended before all bytes were decoded")
    return bytes(out)


def compdecomp(data: bytes) -> bytes:
    """Compress data and decompress it again.

    Data that cannot be compressed is returned unchanged.
    """
    data = bytes(data)
    try:
        comp, codes = _encode(data)
    except HuffmanError:
        return data
    return decompress(comp, codes, len(data))


def run_benchmark(repeat: int) -> bytes:
    """Round-trip the reference data `repeat` times; return the last result."""
    if repeat < 1:
        raise ValueError("repeat must be at least 1")
    result = b""
    for _ in range(repeat):
        result = compdecomp(ORIG_DATA)
    return result


def verify_benchmark(result: bytes) -> bool:
    """A run is correct when the round trip reproduced the reference data."""
    return bytes(result) == ORIG_DATA