# MIT License
#
# Copyright (c) 2022 Quandela
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
Binary reflected Gray code: consecutive codes differ by exactly one bit, which lets subset-sum based algorithms
update their running state with a single row/column per step instead of recomputing it.

See Nijenhuis & Wilf, *Combinatorial Algorithms for Computers and Calculators*, chapter 1.
"""
from typing import Iterator, NamedTuple


class GrayStep(NamedTuple):
    """One step of a Gray code enumeration

    :param index: index of the bit which changed
    :param direction: +1 if the bit was set (element included), -1 if it was cleared (element excluded)
    """
    index: int
    direction: int


def gray_code(i: int) -> int:
    return i ^ (i >> 1)


def flipped_bit(i: int) -> int:
    """Index of the bit differing between the Gray codes of i-1 and i (i >= 1)"""
    d = gray_code(i - 1) ^ gray_code(i)
    j = -1
    while d > 0:
        d >>= 1
        j += 1
    return j


def gray_code_steps(n_steps: int) -> Iterator[GrayStep]:
    """Lazily enumerate the changes between Gray codes 0, 1, ..., n_steps

    The state carried between steps is the previous code, so the sequence cannot be resumed in the middle.
    """
    old_gray = 0
    for i in range(1, n_steps + 1):
        new_gray = gray_code(i)
        yield GrayStep(flipped_bit(i), 1 if new_gray > old_gray else -1)
        old_gray = new_gray
