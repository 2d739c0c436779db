"""Small computational kernels with self-checking reference results, and a stopwatch."""

__version__ = "0.1.0"

__all__ = [
    "crc32",
    "cubic",
    "edn",
    "huffman",
    "matmult",
    "minver",
    "nbody",
    "sha256",
    "timing",
]