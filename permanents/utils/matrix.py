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

from __future__ import annotations

from typing import Optional, Union

import numpy as np
import sympy as sp

from .errors import ShapeError

RandomSource = Optional[Union[int, np.random.Generator]]


def _to_array(source) -> np.ndarray:
    """Convert an input to a numpy array. Sympy matrices are kept exact, as arrays of sympy objects."""
    if isinstance(source, sp.MatrixBase):
        return np.array(source.tolist(), dtype=object)
    if isinstance(source, sp.NDimArray):
        return np.array(source.tolist(), dtype=object)
    array = np.asarray(source)
    if array.dtype.kind in "biu":
        array = array.astype(float)
    elif array.dtype.kind not in "fcO":
        raise TypeError(f"cannot compute a permanent of {array.dtype} values")
    return array


def is_exact(array: np.ndarray) -> bool:
    """Exact arrays hold sympy numbers and are computed with exact arithmetic"""
    return array.dtype == object


def as_square_matrix(source) -> np.ndarray:
    """Return a numpy view of a square matrix

    :param source: a nested list, a numpy array or a sympy matrix
    :raises ShapeError: if source is not a 2D square matrix
    """
    array = _to_array(source)
    if array.ndim != 2 or array.shape[0] != array.shape[1]:
        raise ShapeError(f"permanent: argument must be a square matrix, got shape {array.shape}")
    return array


def as_cubic_tensor(source) -> np.ndarray:
    """Return a numpy view of a 3-tensor having the same extent on its three axes

    :raises ShapeError: if source is not a square 3-indices tensor
    """
    array = _to_array(source)
    if array.ndim != 3 or len(set(array.shape)) != 1:
        raise ShapeError(f"tensor permanent implemented only for square 3-indices tensors, got shape {array.shape}")
    return array


def power_of_two(exponent: int, exact: bool):
    """2**exponent, as a sympy rational when computing exactly"""
    if exact:
        return sp.Integer(2) ** exponent
    return 2.0 ** exponent


def random_unitary(n: int, rng: RandomSource = None) -> np.ndarray:
    r"""Generate a Haar random unitary matrix

    :param n: size of the matrix
    :param rng: a numpy Generator or a seed, None for fresh entropy
    :return: a complex n x n unitary matrix
    """
    rng = np.random.default_rng(rng)
    u = rng.standard_normal((n, n)) + 1j * rng.standard_normal((n, n))
    (q, r) = np.linalg.qr(u)
    r_diag = np.sign(np.diagonal(np.real(r)))
    return q * r_diag


def distinguishability_tensor(mode_matrix, gram_matrix) -> np.ndarray:
    r"""Build the 3-tensor :math:`W_{k,l,j} = M_{k,j} M_{l,j}^* S_{l,k}` describing partially distinguishable
    photons, whose tensor permanent is the output probability.

    :param mode_matrix: n x n mode mixing matrix M
    :param gram_matrix: n x n Gram matrix S of the photon internal states
    """
    m = as_square_matrix(mode_matrix)
    s = as_square_matrix(gram_matrix)
    if m.shape != s.shape:
        raise ShapeError(f"mode matrix {m.shape} and gram matrix {s.shape} size mismatch")
    return m[:, None, :] * np.conj(m)[None, :, :] * s.T[:, :, None]
