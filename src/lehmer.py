"""Convert between integers and their Lehmer codes, with a small CLI entrypoint.

A Lehmer code writes a non-negative integer in the factorial number system:
the least-significant digit is weighted by 0!, the next by 1!, then 2!, 3! and
so on. Since 0! and 1! are both 1, the rightmost digit is always 0.

    factorials:          5!  4!  3!  2!  1!  0!
    decimal weighting:  120  24   6   2   1   1
                          1   0   0   1   1   0  =  120 + 2 + 1  =  123

Usage
-----
    python src/lehmer.py 1234                     # prints 1 4 1 1 2 0 0
    python src/lehmer.py --decode 1 4 1 1 2 0 0   # prints 1234

All arithmetic is done on Python integers, so values of any size convert
exactly.
"""

from __future__ import annotations

import argparse
import sys
from typing import Iterable

__all__ = ["from_lehmer", "to_lehmer"]

__version__ = "0.1.0"


def to_lehmer(n: int) -> list[int]:
    """Return the Lehmer code of ``n``, most-significant digit first.

    >>> to_lehmer(1234)
    [1, 4, 1, 1, 2, 0, 0]

    Raises:
        TypeError:      when ``n`` is not an integer.
        ValueError:     when ``n`` is negative.
    """

    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("to_lehmer() requires an integer input")
    if n < 0:
        raise ValueError("to_lehmer() is undefined for negative integers")

    return _extract_digits(n, _lehmer_length(n))


def from_lehmer(digits: Iterable[int]) -> int:
    """Return the integer represented by the Lehmer code ``digits``.

    ``digits`` is read most-significant first and is left untouched. Digits
    above their canonical bound are still weighted by their place value.

    >>> from_lehmer([2, 2, 0, 0])
    16

    Raises:
        TypeError:      when ``digits`` is not iterable or holds a non-integer.
        ValueError:     when ``digits`` is empty or holds a negative digit.
    """

    if isinstance(digits, (str, bytes)):
        raise TypeError("from_lehmer() requires a sequence of integers")
    try:
        code = list(digits)
    except TypeError:
        raise TypeError("from_lehmer() requires a sequence of integers") from None

    if not code:
        raise ValueError("from_lehmer() requires at least one digit")
    for digit in code:
        if isinstance(digit, bool) or not isinstance(digit, int):
            raise TypeError(f"from_lehmer() digits must be integers, got {digit!r}")
        if digit < 0:
            raise ValueError(f"from_lehmer() digits must be non-negative, got {digit}")

    total = 0
    place_value = 1
    for order, digit in enumerate(reversed(code)):
        if order:
            place_value *= order
        total += digit * place_value
    return total


def _lehmer_length(n: int) -> int:
    """Return the smallest ``k`` with ``k! > n``."""

    factorial = 1
    step = 1
    while True:
        factorial *= step
        step += 1
        if factorial > n:
            return step - 1


def _extract_digits(n: int, length: int) -> list[int]:
    """Split ``n`` into ``length`` factorial-base digits, highest place first."""

    digits = []
    while length > 1:
        digit, n = divmod(n, _factorial(length - 1))
        digits.append(digit)
        length -= 1
    digits.append(0)
    return digits


def _factorial(k: int) -> int:
    product = 1
    for value in _range_inclusive(2, k):
        product *= value
    return product


def _range_inclusive(start: int, stop: int) -> Iterable[int]:
    """Return the inclusive range [start, stop]."""

    if stop < start:
        return []
    return range(start, stop + 1)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Convert a non-negative integer to its Lehmer code, or back with --decode."
    )
    parser.add_argument(
        "values",
        nargs="+",
        type=int,
        metavar="N",
        help="Integer to encode, or the digits to decode (most-significant first)",
    )
    parser.add_argument(
        "-d",
        "--decode",
        action="store_true",
        help="Treat the values as Lehmer digits and print the integer they represent",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    if not args.decode and len(args.values) != 1:
        parser.error("exactly one integer is required unless --decode is given")

    try:
        if args.decode:
            output = str(from_lehmer(args.values))
        else:
            output = " ".join(str(digit) for digit in to_lehmer(args.values[0]))
    except (TypeError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":  # pragma: no cover - exercised via CLI
    sys.exit(main())
