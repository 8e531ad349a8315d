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

from permanents.utils._validated_params import ValidatedFloat, ValidatedInt


class _Settings:
    ratio = ValidatedFloat(min_value=0, max_value=1, default_value=0.5)
    count = ValidatedInt(min_value=1)

    def __init__(self, ratio=None, count=None):
        self.ratio = ratio
        self.count = count


def test_defaults():
    s = _Settings()
    assert s.ratio == 0.5
    assert s.count is None


def test_valid_values():
    s = _Settings(ratio=1, count=3)
    assert s.ratio == 1
    assert s.count == 3
    s.ratio = None
    assert s.ratio == 0.5


@pytest.mark.parametrize("ratio, error", [(-0.1, ValueError), (1.5, ValueError), ("0.2", TypeError),
                                          (True, TypeError)])
def test_invalid_float(ratio, error):
    with pytest.raises(error):
        _Settings(ratio=ratio)


@pytest.mark.parametrize("count, error", [(0, ValueError), (2.0, TypeError), (False, TypeError)])
def test_invalid_int(count, error):
    with pytest.raises(error):
        _Settings(count=count)


def test_invalid_default():
    with pytest.raises(ValueError):
        ValidatedFloat(min_value=0, default_value=-1)
