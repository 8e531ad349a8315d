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

from itertools import combinations

import numpy as np
import sympy as sp

from permanents.utils.logging import get_logger, deprecated
from permanents.utils.matrix import as_cubic_tensor, distinguishability_tensor, is_exact


def _nonempty_subsets(n: int) -> list[tuple[int, ...]]:
    """Non empty subsets of {0..n-1}, by increasing size then lexicographic order"""
    return [subset for size in range(1, n + 1) for subset in combinations(range(n), size)]


def _real_part(value, exact: bool):
    if exact:
        return sp.re(value)
    return np.real(value)


def ryser_tensor_permanent(tensor):
    r"""
    Compute the permanent of a :math:`n^3`-dimensional 3-tensor of the form

    .. math::
        W_{k,l,j} = M_{k,j} M_{l,j}^* S_{l,k}

    following Ryser's algorithm in approximately :math:`2^{2n-1}` iterations, see
    `Sampling of partially distinguishable bosons and the relation to the multidimensional permanent
    <https://arxiv.org/pdf/1410.7687.pdf>`_.

    Each unordered pair of subsets :math:`(R, S)` is visited once, counting twice when :math:`R \neq S` since the
    tensor is hermitian in its first two indices. The result is real.

    Warning: no Gray code is used here, every subset pair sum is recomputed from scratch.

    :param tensor: n x n x n tensor
    :raises ShapeError: if the tensor is not a square 3-indices tensor
    """
    w = as_cubic_tensor(tensor)
    n = w.shape[0]
    exact = is_exact(w)
    get_logger().log_resources({"method": "ryser_tensor", "n": n})
    if n == 0:
        return 1

    subsets = _nonempty_subsets(n)
    res = 0
    for r, rows in enumerate(subsets):
        row_block = w[list(rows), :, :].sum(axis=0)
        for s in range(r, len(subsets)):
            cols = subsets[s]
            t = np.prod(row_block[list(cols), :].sum(axis=0))
            weight = 1 if r == s else 2
            sign = -1 if (len(rows) + len(cols)) % 2 else 1
            res += weight * sign * _real_part(t, exact)
    return res


@deprecated(reason="use ryser_tensor_permanent(distinguishability_tensor(U, gram_matrix))")
def multi_dim_ryser(unitary, gram_matrix):
    """Permanent of the tensor built from a mode mixing matrix and a Gram matrix"""
    return ryser_tensor_permanent(distinguishability_tensor(unitary, gram_matrix))
