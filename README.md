# kernelbench

A collection of small, deterministic computational kernels. Each one runs a
fixed workload and checks its result against a known reference value, so it
can serve as a benchmark or as a correctness check.

## Kernels

| Module                  | Workload                                                      |
|-------------------------|---------------------------------------------------------------|
| `kernelbench.cubic`     | Closed-form real roots of cubic polynomials                   |
| `kernelbench.crc32`     | CRC-32 (polynomial 0xEDB88320) over a pseudo-random stream    |
| `kernelbench.matmult`   | 20x20 integer matrix multiplication                           |
| `kernelbench.edn`       | Fixed-point DSP kernels: FIR, IIR, lattice synthesis, DCT     |
| `kernelbench.minver`    | 3x3 single-precision matrix inversion and matrix product      |
| `kernelbench.huffman`   | Huffman compression and decompression round trip              |
| `kernelbench.nbody`     | Momentum and energy of the sun and the outer planets          |
| `kernelbench.sha256`    | SHA-256 message digest                                        |

Every kernel module provides `run_benchmark(repeat)`, which runs the workload
`repeat` times and returns the result of the last run, and
`verify_benchmark(result)`, which returns `True` when that result matches the
reference.

`kernelbench.timing.Stopwatch` measures wall-clock and process CPU time.

## Installation

```
pip install .
```

## Usage

```python
from kernelbench import crc32, sha256
from kernelbench.timing import Stopwatch

with Stopwatch(quiet=True) as watch:
    result = crc32.run_benchmark(10)

assert crc32.verify_benchmark(result)
print(watch.report())   # "Real time: ... ms CPU time: ... ms "

print(sha256.sha256(b"abc").hex())
```

Without `quiet=True`, `Stopwatch.stop()` (and leaving the `with` block)
prints the report line to standard output, or to the `stream` given to the
constructor. `stop()` also returns the `(real, cpu)` elapsed seconds.

The kernels can be used on their own as well:

- `cubic.solve_cubic(1.0, -10.5, 32.0, -30.0)` returns the real roots as a tuple.
- `crc32.crc32(data, crc=0)` checksums any iterable of byte values.
- `huffman.compress(data)`, `huffman.huffman_codes(data)` and
  `huffman.decompress(comp, codes, length)` expose the coder; it raises
  `huffman.HuffmanError` for data it cannot code.
- `minver.minver(matrix, eps)` returns the inverse and the pivot product, and
  raises `minver.SingularMatrixError` for a pivot not larger than `eps`.
- `sha256.Sha256` hashes incrementally with `update(data)` and
  `digest(length=32)`; `digest` resets the hasher.

## What it does not do

There is no command-line program: the kernels are run and timed from Python,
as shown above. No results are stored or compared between runs.

## Running the tests

```
pip install ".[test]"
pytest
```