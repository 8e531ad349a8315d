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

import json
import numpy as np
import pytest
import sympy as sp

from permanents import exact_permanent_ryser, exact_permanent_glynn, naive_permanent, ShapeError, random_unitary, \
    channel
from permanents.algorithms import ryser_permanent, glynn_permanent
from _test_utils import random_matrix, assert_scalar_close

EXACT_METHODS = [ryser_permanent, glynn_permanent, naive_permanent]


@pytest.mark.parametrize("method", EXACT_METHODS)
def test_small_known_values(method):
    assert method(np.eye(2)) == pytest.approx(1)
    assert method(np.ones((2, 2))) == pytest.approx(2)
    assert method([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == pytest.approx(450, abs=1e-9)
    assert method([[3]]) == pytest.approx(3)
    assert method(np.ones((4, 4))) == pytest.approx(24)


@pytest.mark.parametrize("method", EXACT_METHODS)
def test_empty_matrix(method):
    assert method(np.zeros((0, 0))) == 1


@pytest.mark.parametrize("method", [ryser_permanent, glynn_permanent])
def test_exact_arithmetic(method):
    result = method(sp.Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]]))
    assert result == 450
    assert isinstance(result, sp.Integer)

    half = sp.Rational(1, 2)
    result = method(sp.Matrix([[half, 1], [1, half]]))
    assert result == sp.Rational(5, 4)


@pytest.mark.parametrize("method", EXACT_METHODS)
@pytest.mark.parametrize("source", [[[1, 2, 3], [4, 5, 6]], np.ones((2, 2, 2)), [1, 2]])
def test_non_square(method, source):
    with pytest.raises(ShapeError):
        method(source)


@pytest.mark.parametrize("n", range(1, 8))
def test_ryser_glynn_naive_agree(n):
    m = random_matrix(n, seed=n)
    expected = naive_permanent(m)
    assert_scalar_close(ryser_permanent(m), expected)
    assert_scalar_close(glynn_permanent(m), expected)


@pytest.mark.long_test
def test_ryser_glynn_naive_agree_8():
    m = random_matrix(8, seed=8, is_complex=False)
    expected = naive_permanent(m)
    assert_scalar_close(exact_permanent_ryser(m), expected)
    assert_scalar_close(exact_permanent_glynn(m), expected)


def test_ryser_glynn_agree_on_larger_matrices():
    u = random_unitary(12, rng=3)
    assert_scalar_close(exact_permanent_ryser(u), exact_permanent_glynn(u), rel=1e-7)


def test_permanent_properties():
    m = random_matrix(5, seed=42)
    p = ryser_permanent(m)
    # invariant under transposition and permutations of rows or columns
    assert_scalar_close(ryser_permanent(m.T), p)
    assert_scalar_close(glynn_permanent(m[[3, 1, 4, 0, 2], :]), p)
    assert_scalar_close(glynn_permanent(m[:, [1, 0, 2, 4, 3]]), p)
    # linear in each row
    scaled = m.copy()
    scaled[2, :] *= 3
    assert_scalar_close(ryser_permanent(scaled), 3 * p)


def test_diagonal_matrix():
    d = np.diag([1, 2, 3, 4, 5j])
    assert_scalar_close(ryser_permanent(d), 120j)
    assert_scalar_close(glynn_permanent(d), 120j)


def test_input_is_not_modified():
    m = random_matrix(4, seed=1)
    copy = m.copy()
    ryser_permanent(m)
    glynn_permanent(m)
    assert np.array_equal(m, copy)


def test_resources_are_logged(recording_logger):
    ryser_permanent(np.eye(3))
    glynn_permanent(np.eye(2))
    resources = [json.loads(msg) for msg in recording_logger.messages(ch=channel.resources)]
    assert resources == [{"method": "ryser", "n": 3}, {"method": "glynn", "n": 2}]
