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


def ryser_permanent(matrix):
    r"""
    Compute the permanent of a matrix :math:`A` of dimension :math:`n` using Ryser algorithm with Gray ordering

    .. math::
        perm(A) = (-1)^n \sum_{S \subseteq \{1 \dots n\}} (-1)^{|S|} \prod_{i=1}^n \sum_{j \in S} A_{i,j}

    in :math:`O(2^{n-1}n)` operations. Starting from the full set, each Gray code step adds or removes one column,
    i.e. adds or subtracts twice this column from the running row sums.

    :param matrix: square matrix (numpy array, nested list, or sympy matrix for exact arithmetic)
    :raises ShapeError: if the matrix is not square
    """
    a = as_square_matrix(matrix)
    n = a.shape[0]
    get_logger().log_resources({"method": "ryser", "n": n})
    if n == 0:
        return 1

    aa = 2 * a
    rho = [True] * n
    v = a.sum(axis=1)
    p = np.prod(v)
    add = True
    for a_idx, _ in gray_code_steps(2 ** (n - 1) - 1):
        if rho[a_idx]:
            v -= aa[:, a_idx]
        else:
            v += aa[:, a_idx]
        rho[a_idx] = not rho[a_idx]
        add = not add
        if add:
            p += np.prod(v)
        else:
            p -= np.prod(v)

    return p * power_of_two(1 - n, is_exact(a))
