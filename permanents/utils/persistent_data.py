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
import os
import shutil
import warnings
from typing import Optional, Union
from platformdirs import PlatformDirs

from ._enums import FileFormat

_APP_NAME = "permanents"
_APP_AUTHOR = "permanents"
_CONFIG_FILE_NAME = "config.json"


class PersistentData:
    """PersistentData handles the package persistent data (logger configuration)
    On init, it creates a directory (if it doesn't exist) for storing persistent data
    Directory depends of the os:
    * Linux: '/home/my_user/.local/share/permanents'
    * Windows: 'C:\\Users\\my_user\\AppData\\Local\\permanents\\permanents'
    * Darwin: '/Users/my_user/Library/Application Support/permanents'

    If the directory cannot be created or read/write in, a warning will inform the user

    :param directory: overrides the platform directory (e.g. a temporary folder in tests)
    """

    def __init__(self, directory: Optional[str] = None) -> None:
        if directory is None:
            directory = PlatformDirs(_APP_NAME, _APP_AUTHOR).user_data_dir
        self._directory = str(directory)
        try:
            self._create_directory()
        except OSError as exc:
            warnings.warn(UserWarning(f"Cannot create {self._directory}: {exc}"))
            return
        if not self.is_writable() or not self.is_readable():
            warnings.warn(UserWarning(f"Cannot read or write in {self._directory}"))

    def is_writable(self) -> bool:
        return os.access(self._directory, os.W_OK)

    def is_readable(self) -> bool:
        return os.access(self._directory, os.R_OK)

    def _create_directory(self) -> None:
        if not os.path.exists(self._directory):
            os.makedirs(self._directory)

    def get_folder_size(self) -> int:
        """Get the directory data size

        :return: directory data size in bytes
        """
        return sum(os.path.getsize(os.path.join(dirpath, filename))
                   for dirpath, dirnames, filenames in os.walk(self._directory) for filename in filenames)

    def get_full_path(self, element_name: str) -> str:
        """Get the full path of an element supposedly in persistent data directory

        :param element_name: name of the element (with extension)
        :return: full path of the file
        """
        return os.path.join(self._directory, element_name)

    def has_file(self, filename: str) -> bool:
        return os.path.exists(self.get_full_path(filename))

    def delete_file(self, filename: str):
        """Delete a file in persistent data directory
        if file doesn't exist, raise a user warning

        :param filename: name of the file to delete (with extension)
        """
        file_path = self.get_full_path(filename)
        if not os.path.exists(file_path):
            warnings.warn(UserWarning(f"Cannot delete {file_path}, file doesn't exist"))
            return
        os.remove(file_path)

    def write_file(self, filename: str, data: Union[bytes, str], file_format: FileFormat):
        file_path = self.get_full_path(filename)

        if file_format == FileFormat.BINARY:
            with open(file_path, "wb") as file:
                file.write(data)
        elif file_format == FileFormat.TEXT:
            with open(file_path, "wt", encoding="UTF-8") as file:
                file.write(data)
        else:
            raise NotImplementedError(f"format {file_format} is not supported")

    def read_file(self, filename: str, file_format: FileFormat) -> Union[bytes, str]:
        """Read data from a file in persistent data directory

        :param filename: name of the file to read (with extension)
        :raises FileNotFoundError: Raise an exception if file is not found
        :return: data
        """
        file_path = self.get_full_path(filename)
        if not os.path.exists(file_path):
            raise FileNotFoundError(file_path)

        if file_format == FileFormat.BINARY:
            with open(file_path, "rb") as file:
                return file.read().rstrip(b'\n ')
        if file_format == FileFormat.TEXT:
            with open(file_path, "rt", encoding="UTF-8") as file:
                return file.read().rstrip()
        raise NotImplementedError(f"format {file_format} is not supported")

    def load_config(self) -> dict:
        """Load the configuration dictionary, an empty one if none was saved yet"""
        if not self.has_file(_CONFIG_FILE_NAME):
            return {}
        try:
            return json.loads(self.read_file(_CONFIG_FILE_NAME, FileFormat.TEXT))
        except json.JSONDecodeError as e:
            warnings.warn(UserWarning(f"Corrupted configuration file {self.get_full_path(_CONFIG_FILE_NAME)}: {e}"))
            return {}

    def save_config(self, config: dict):
        """Merge config into the saved configuration (top level keys are replaced)"""
        if not self.is_writable():
            warnings.warn(UserWarning(f"Cannot save configuration, {self._directory} is not writable"))
            return
        full_config = self.load_config()
        full_config.update(config)
        self.write_file(_CONFIG_FILE_NAME, json.dumps(full_config, indent=2), FileFormat.TEXT)

    def clear_all_data(self):
        """Delete persistent data directory and recreate it
        """
        shutil.rmtree(self._directory)
        self._create_directory()

    @property
    def directory(self) -> str:
        return self._directory
