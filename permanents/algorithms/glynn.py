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

from permanents.utils.gray_code import gray_code_steps
from permanents.utils.logging import get_logger
from permanents.utils.matrix import as_square_matrix, is_exact, power_of_two


def glynn_permanent(matrix):
    r"""
    Compute the permanent of a matrix :math:`A` of dimension :math:`n` using Glynn formula

    .. math::
        perm(A) = \frac{1}{2^{n-1}} \sum_\delta \left(\prod_{k=1}^n \delta_k\right)
                  \prod_{i=1}^n \sum_{j=1}^n \delta_j A_{j,i}

    where :math:`\delta \in \{-1,+1\}^n` with :math:`\delta_n = +1`, in :math:`O(n2^{n-1})` operations.
    The sign vectors are visited in Gray code order so that a single row is added to or subtracted from the
    running column combinations at each step.

    :param matrix: square matrix (numpy array, nested list, or sympy matrix for exact arithmetic)
    :raises ShapeError: if the matrix is not square
    """
    a = as_square_matrix(matrix)
    n = a.shape[0]
    get_logger().log_resources({"method": "glynn", "n": n})
    if n == 0:
        return 1

    row_comb = a.sum(axis=0)
    num_iter = 2 ** (n - 1)
    res = 0
    sign = 1
    for flipped, direction in gray_code_steps(num_iter):
        if sign > 0:
            res += np.prod(row_comb)
        else:
            res -= np.prod(row_comb)
        # a bit set in the gray code turns its delta from +1 to -1
        row_comb -= 2 * direction * a[flipped, :]
        sign = -sign

    return res * power_of_two(1 - n, is_exact(a))
