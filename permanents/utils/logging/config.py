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

import warnings
from enum import Enum

from ..persistent_data import PersistentData

_LOGGING = "logging"
_CHANNELS = "channels"
_ENABLE_FILE = "enable_file"


class level(Enum):
    debug = 10
    info = 20
    warn = 30
    err = 40
    critical = 50
    off = 60


class channel(Enum):
    general = 0
    resources = 1
    user = 2


_CHANNEL_NAMES = [c.name for c in channel]


class LoggerConfig(dict):
    """This class represent the logger configuration as a dictionary and can be used to save it into persistent data.
    On class initialization, the configuration will be loaded from persistent data.

    :param persistent_data: where the configuration is loaded from and saved to (default: user data directory)
    """
    def __init__(self, persistent_data: PersistentData = None):
        super().__init__()
        self.reset()
        self._persistent_data = persistent_data or PersistentData()
        self._load_from_persistent_data()

    def _init_channel(self, ch: channel, lvl: level = level.off):
        self[_CHANNELS][ch.name] = {"level": lvl.name}

    def reset(self):
        """Reset the logger configuration to its default value, which is:
            - Disable file
            - Channel user at level warning
            - Channels general & resources off
        """
        self[_ENABLE_FILE] = False
        self[_CHANNELS] = {}
        for ch in [channel.general, channel.resources]:
            self._init_channel(ch)
        self._init_channel(channel.user, level.warn)

    def _load_from_persistent_data(self):
        config = self._persistent_data.load_config()
        try:
            if config and _LOGGING in config:
                config = config[_LOGGING]
                if _CHANNELS in config:
                    for key in config[_CHANNELS]:
                        if key in _CHANNEL_NAMES:
                            level_name = config[_CHANNELS][key]["level"]
                            if level_name not in level.__members__:
                                raise KeyError(f"unknown level {level_name}")
                            self[_CHANNELS][key] = {"level": level_name}
                if _ENABLE_FILE in config:
                    self[_ENABLE_FILE] = config[_ENABLE_FILE]
        except KeyError as e:
            warnings.warn(UserWarning(f"Incorrect logger config, try to reset and save it. {e}"))

    def set_level(self, lvl: level, ch: channel):
        """Set the level of a channel in the configuration

        Warning: this will not change the current logger level but only the level of the channel in the current
        LoggerConfig instance
        """
        self[_CHANNELS][ch.name]["level"] = lvl.name

    def get_level(self, ch: channel) -> level:
        return level[self[_CHANNELS][ch.name]["level"]]

    def enable_file(self):
        self[_ENABLE_FILE] = True

    def disable_file(self):
        self[_ENABLE_FILE] = False

    def file_is_enabled(self) -> bool:
        return self[_ENABLE_FILE]

    @property
    def persistent_data(self) -> PersistentData:
        return self._persistent_data

    def save(self):
        """Save the current logger configuration in the persistent data
        """
        self._persistent_data.save_config({_LOGGING: dict(self)})
