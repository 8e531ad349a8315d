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

import numpy as np
import permanents as perm


def _unitary(n):
    return perm.random_unitary(n, rng=n)


def test_ryser_12(benchmark):
    benchmark(perm.exact_permanent_ryser, _unitary(12))


def test_glynn_12(benchmark):
    benchmark(perm.exact_permanent_glynn, _unitary(12))


def test_ryser_16(benchmark):
    benchmark(perm.exact_permanent_ryser, _unitary(16))


def test_tensor_5(benchmark):
    u = _unitary(5)
    benchmark(perm.exact_tensor_permanent, perm.distinguishability_tensor(u, np.ones((5, 5))))


def test_glynn_estimate_20(benchmark):
    benchmark(perm.estimate_permanent, _unitary(20), 100000, 1)


def test_glynn_adaptive_20(benchmark):
    benchmark(perm.estimate_permanent_adaptive, _unitary(20), 1e-3, 1000, 100000, 5, 1)
