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

from ._abstract_backends import APermanentBackend
from permanents.algorithms import ryser_permanent, glynn_permanent, naive_permanent


class RyserBackend(APermanentBackend):
    """Ryser formula with Gray code ordering, O(n 2^n)"""

    @property
    def name(self) -> str:
        return "Ryser"

    def permanent(self, matrix):
        return ryser_permanent(matrix)


class GlynnBackend(APermanentBackend):
    """Glynn formula with Gray code ordering, O(n 2^n)"""

    @property
    def name(self) -> str:
        return "Glynn"

    def permanent(self, matrix):
        return glynn_permanent(matrix)


class NaiveBackend(APermanentBackend):
    """Sum over all permutations, no clever calculation path, O(n n!)"""

    @property
    def name(self) -> str:
        return "Naive"

    def permanent(self, matrix):
        return naive_permanent(matrix)
