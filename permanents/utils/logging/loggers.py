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
import logging as python_logging
from abc import ABC, abstractmethod
from typing import Union

from .config import LoggerConfig, channel, level

_LOGGER_NAME = "permanents"
_LOG_FILE_NAME = "log"


def _channel_name(ch: Union[channel, str]) -> str:
    return ch.name if isinstance(ch, channel) else ch


class ILogger(ABC):
    """Diagnostics sink. Messages are routed to a channel (user, general or resources), each having its own level"""

    @abstractmethod
    def apply_config(self, config: LoggerConfig):
        pass

    @abstractmethod
    def set_level(self, lvl: level, ch: channel = channel.user):
        pass

    @abstractmethod
    def debug(self, msg: str, ch: channel = channel.user):
        pass

    @abstractmethod
    def info(self, msg: str, ch: channel = channel.user):
        pass

    @abstractmethod
    def warn(self, msg: str, ch: channel = channel.user):
        pass

    @abstractmethod
    def error(self, msg: str, ch: channel = channel.user, exc_info=None):
        pass

    @abstractmethod
    def critical(self, msg: str, ch: channel = channel.user, exc_info=None):
        pass

    def log_resources(self, my_dict: dict):
        """Log resources as a dictionary with:
             - level: info
             - channel: resources
             - serializing the dictionary as json so it can be easily deserialized

        :param my_dict: resources dictionary to log
        """
        self.info(json.dumps(my_dict), channel.resources)


class PythonLogger(ILogger):
    """Logger relying on the standard python logging module. Each record carries its channel, and is filtered out
    when its level is below the level configured for this channel."""

    def __init__(self, config: LoggerConfig = None) -> None:
        self._logger = python_logging.getLogger(_LOGGER_NAME)
        self._logger.setLevel(python_logging.DEBUG)
        self._logger.propagate = False
        if not any(getattr(h, "_permanents_console", False) for h in self._logger.handlers):
            console = python_logging.StreamHandler()
            console._permanents_console = True
            self._logger.addHandler(console)
        self._file_handler = None
        self._config = None
        for previous_filter in list(self._logger.filters):
            if isinstance(getattr(previous_filter, "__self__", None), PythonLogger):
                self._logger.removeFilter(previous_filter)
        self._logger.addFilter(self._message_has_to_be_logged)
        self.apply_config(config if config is not None else LoggerConfig())

    def _message_has_to_be_logged(self, record) -> bool:
        if "channel" in record.__dict__:
            if record.levelno < self._config.get_level(channel[record.channel]).value:
                return False
        return True

    def apply_config(self, config: LoggerConfig):
        self._config = config
        if config.file_is_enabled():
            self.enable_file()
        else:
            self.disable_file()

    def get_log_file_path(self) -> str:
        return self._config.persistent_data.get_full_path(_LOG_FILE_NAME)

    def enable_file(self):
        if self._file_handler is not None:
            return
        self._file_handler = python_logging.FileHandler(self.get_log_file_path(), encoding="UTF-8")
        self._file_handler.setFormatter(python_logging.Formatter("%(asctime)s %(message)s"))
        self._logger.addHandler(self._file_handler)

    def disable_file(self):
        if self._file_handler is None:
            return
        self._logger.removeHandler(self._file_handler)
        self._file_handler.close()
        self._file_handler = None

    def set_level(self, lvl: level, ch: channel = channel.user):
        self._config.set_level(lvl, ch)

    def debug(self, msg: str, ch: channel = channel.user):
        self._logger.debug(f"[debug] {msg}", extra={"channel": _channel_name(ch)})

    def info(self, msg: str, ch: channel = channel.user):
        self._logger.info(f"[info] {msg}", extra={"channel": _channel_name(ch)})

    def warn(self, msg: str, ch: channel = channel.user):
        self._logger.warning(f"[warning] {msg}", extra={"channel": _channel_name(ch)})

    def error(self, msg: str, ch: channel = channel.user, exc_info=None):
        self._logger.error(f"[error] {msg}", exc_info=exc_info, extra={"channel": _channel_name(ch)})

    def critical(self, msg: str, ch: channel = channel.user, exc_info=None):
        self._logger.critical(f"[critical] {msg}", exc_info=exc_info, extra={"channel": _channel_name(ch)})
