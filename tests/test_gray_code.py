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

import pytest

from permanents.utils.gray_code import gray_code, flipped_bit, gray_code_steps, GrayStep


def test_gray_code_first_values():
    assert [gray_code(i) for i in range(8)] == [0, 1, 3, 2, 6, 7, 5, 4]


@pytest.mark.parametrize("n", [1, 2, 3, 5, 8])
def test_consecutive_codes_differ_by_one_bit(n):
    codes = [gray_code(i) for i in range(2 ** n)]
    assert sorted(codes) == list(range(2 ** n))
    for i in range(1, 2 ** n):
        diff = codes[i - 1] ^ codes[i]
        assert diff & (diff - 1) == 0
        assert diff == 1 << flipped_bit(i)


def test_flipped_bit():
    assert [flipped_bit(i) for i in range(1, 9)] == [0, 1, 0, 2, 0, 1, 0, 3]


@pytest.mark.parametrize("n_steps", [0, 1, 7, 64])
def test_steps_replay_the_codes(n_steps):
    code = 0
    steps = list(gray_code_steps(n_steps))
    assert len(steps) == n_steps
    for i, step in enumerate(steps, start=1):
        assert isinstance(step, GrayStep)
        bit = 1 << step.index
        if step.direction > 0:
            assert not code & bit
        else:
            assert step.direction == -1
            assert code & bit
        code ^= bit
        assert code == gray_code(i)


def test_steps_are_lazy():
    steps = gray_code_steps(2 ** 40)
    assert next(steps) == GrayStep(0, 1)
    assert next(steps) == GrayStep(1, 1)
    assert next(steps) == GrayStep(0, -1)
