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

from itertools import permutations

from permanents.utils.matrix import as_square_matrix, as_cubic_tensor


def naive_permanent(matrix):
    r"""
    Computes the permanent of the matrix :math:`U` of dimension :math:`n` using the definition

    .. math::
        perm(U) = \sum_{\sigma \in S_n} \prod_{i=1}^n U_{i,\sigma(i)}

    in :math:`n!` arithmetic operations. Meant as a reference for small matrices.
    """
    u = as_square_matrix(matrix)
    n = u.shape[0]
    res = 0
    for sigma in permutations(range(n)):
        term = 1
        for i in range(n):
            term *= u[i, sigma[i]]
        res += term
    return res


def naive_tensor_permanent(tensor):
    r"""
    Computes the permanent of a cubic 3-tensor :math:`W` from its definition

    .. math::
        perm(W) = \sum_{\sigma, \rho \in S_n} \prod_{i=1}^n W_{i,\sigma(i),\rho(i)}

    in :math:`(n!)^2` arithmetic operations.
    """
    w = as_cubic_tensor(tensor)
    n = w.shape[0]
    res = 0
    for sigma in permutations(range(n)):
        for rho in permutations(range(n)):
            term = 1
            for i in range(n):
                term *= w[i, sigma[i], rho[i]]
            res += term
    return res
