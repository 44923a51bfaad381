# diceforge

A collection of pseudo-random number generators sharing one interface,
plus 64-point Gauss–Legendre quadrature helpers for one- and
two-dimensional integrals. Pure Python, no dependencies.

## Installation

```
pip install diceforge
```

## Generators

Every generator derives from `diceforge.generator.Generator` and offers:

| Method | Returns |
| --- | --- |
| `next()` | a raw unsigned integer, 32 or 64 bits wide (see the `bits` attribute) |
| `next_unit()` | a float in `[0, 1)` |
| `next_in_range(low, high)` | an integer in `[low, high]`, both ends included; `ValueError` if `high < low` |
| `next_in_crange(low, high)` | a float in `[low, high)`; `ValueError` if `low == high` |
| `reset_seed(seed)` | re-initialises the generator from `seed` |
| `choice(seq, weights=None)` | one element of `seq`, uniformly or according to `weights` |
| `shuffle(seq)` | shuffles the mutable sequence `seq` in place |

`choice` raises `IndexError` for an empty sequence without weights, and
`ValueError` when `seq` and `weights` differ in length, when `seq` is empty,
or when the weights do not sum to a positive value. The largest value
`next()` can return is available as the `max_value` property.

Available generators:

| Module | Classes |
| --- | --- |
| `diceforge.xorshift` | `XORShift32`, `XORShift64` (XORShift*) |
| `diceforge.mt` | `MT32`, `MT64` (Mersenne Twister) |
| `diceforge.lfsr` | `LFSR32`, `LFSR64` (128-bit linear feedback shift register) |
| `diceforge.blumblumshub` | `BlumBlumShub32`, `BlumBlumShub64` |
| `diceforge.naor_reingold` | `NaorReingold` (Naor–Reingold function over a counter, 32-bit) |

`diceforge.generators` gathers all of them together with the short aliases
`XORShift` (= `XORShift64`), `MT` (= `MT64`), `LFSR` (= `LFSR64`),
`BlumBlumShub` (= `BlumBlumShub64`) and `NaorReingold32` (= `NaorReingold`),
and provides `default_generator()`, which returns one shared,
time-seeded `XORShift64`.

Each generator is constructed with a seed. For the XORShift, Mersenne
Twister, LFSR and Naor–Reingold generators a seed of `0` means "seed from
the current time". The Blum–Blum–Shub generators use the seed as given, so
pick one other than `0` or `1`: those make the state stay fixed and the
output constant.

```python
from diceforge.xorshift import XORShift64
from diceforge.mt import MT32

rng = XORShift64(123)
print(rng.next())                 # 64-bit integer
print(rng.next_unit())            # float in [0, 1)
print(rng.next_in_range(1, 6))    # a die roll

mt = MT32(2024)
cards = list(range(52))
mt.shuffle(cards)

colour = mt.choice(["red", "green", "blue"], [0.5, 0.3, 0.2])
```

Two generators built with the same non-zero seed produce the same sequence,
and `reset_seed` restarts it:

```python
a = XORShift64(42)
first = [a.next() for _ in range(3)]
a.reset_seed(42)
assert [a.next() for _ in range(3)] == first
```

### Estimating π

```python
from diceforge.xorshift import XORShift64

rng = XORShift64(7)
samples = 100_000
inside = sum(
    1
    for _ in range(samples)
    if rng.next_in_crange(0, 1) ** 2 + rng.next_in_crange(0, 1) ** 2 <= 1
)
print(4 * inside / samples)
```

### 128-bit arithmetic

`diceforge.bigint.BigInt128` holds the Blum–Blum–Shub state as four 32-bit
limbs (`data`, least significant first). `square()` squares it in place
keeping the low four limbs, and `mod(n)` reduces it modulo `n` when it
exceeds `n`. `int()` gives its value and `str()` prints the limbs from most
to least significant.

## Integration

`diceforge.integrate` provides 64-point Gauss–Legendre quadrature:

- `gaussian_quadrature(f, x1, x2)` – a single quadrature over `[x1, x2]`;
- `adaptive_gaussian_quadrature(f, a, b)` – recursive bisection until two
  estimates agree to machine precision (with a bounded recursion depth);
- `integrate(f, bounds)` – integral of `f(x)` over `bounds = (low, high)`;
- `double_integrate(f, bounds_0, bounds_1, order)` – integral of `f(x, y)`.
  `bounds_0` are the constant bounds of the outer variable; `bounds_1` the
  bounds of the inner variable, each a number or a function of the outer
  variable. `Order.DX_DY` integrates over `x` first (outer variable `y`),
  `Order.DY_DX` over `y` first (outer variable `x`).

```python
import math
from diceforge.integrate import Order, double_integrate, integrate

print(integrate(math.sin, (0.0, math.pi)))   # ≈ 2.0

area = double_integrate(
    lambda x, y: 16 - x * x - y * y,
    (0.0, 2.0),                                  # y from 0 to 2
    (lambda y: y * y / 4, lambda y: (y + 2) / 4),  # x between two curves of y
    Order.DX_DY,
)
print(area)                                    # ≈ 20803 / 1680
```

## What this package does not do

It provides generators and integration helpers only: there are no
probability distributions (no Gaussian, Poisson, binomial and the like, and
no curve fitting), and there is no command-line tool. Sampling from a
distribution is left to the caller, using `next_unit()` and friends.

## Running the tests

```
pip install "diceforge[test]"
pytest
```