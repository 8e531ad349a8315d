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

"""
Permanents provides exact and randomized algorithms computing the permanent of matrices, and the permanent of the
3-indices tensors describing partially distinguishable photons, as needed to simulate boson sampling experiments.

    - exact computations in O(n 2^n) with Ryser and Glynn formulas, in Gray code order;
    - exact tensor permanent following Ryser's algorithm on pairs of subsets;
    - Gurvits/Glynn randomized estimation, with an adaptive number of trials.
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("permanents")
except PackageNotFoundError:
    __version__ = "0.0.0"

from .algorithms import *
from .backends import APermanentBackend, RyserBackend, GlynnBackend, NaiveBackend, GlynnApproxBackend, \
    AdaptiveGlynnBackend, BackendFactory
from .utils import *
from .utils.logging import level, channel, ILogger, PythonLogger, apply_config, use_python_logger
