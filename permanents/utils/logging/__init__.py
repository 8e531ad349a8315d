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

import functools

from .config import LoggerConfig, level, channel
from .loggers import ILogger, PythonLogger


_logger = None


def get_logger() -> ILogger:
    global _logger
    if _logger is None:
        _logger = PythonLogger()
    return _logger


def set_logger(logger: ILogger):
    """Replace the package logger, e.g. by a custom diagnostics sink"""
    global _logger
    _logger = logger


def use_python_logger():
    """Make a PythonLogger the package logger, unless one is already current"""
    global _logger
    if isinstance(_logger, PythonLogger):
        return
    if _logger is not None:
        _logger.info("Changing to Python logger", channel.general)
    _logger = PythonLogger()


def deprecated(*decorator_args, **decorator_kwargs):
    def decorator_deprecated(func):
        @functools.wraps(func)
        def wrapper_deprecated(*args, **kwargs):
            log = f"DeprecationWarning: Call to deprecated function (or staticmethod) {func.__name__}."
            if "reason" in decorator_kwargs:
                log += f" ({decorator_kwargs['reason']})"
            if "version" in decorator_kwargs:
                log += f" -- Deprecated since version {decorator_kwargs['version']}"
            get_logger().warn(log, channel.user)
            return func(*args, **kwargs)
        return wrapper_deprecated
    return decorator_deprecated


def apply_config(config: LoggerConfig):
    get_logger().apply_config(config)
