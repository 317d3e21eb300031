#!/usr/bin/env python
# -*- coding: utf-8 -*-

import sys
from loguru import logger as loguru_logger


class _Config(object):
    """Class for configuration of the logger of covidstats.

    Note:
        Messages are bound with extra["name"] = "covidstats" and only they are shown with the handler of this class.
        The default handler of loguru (stderr) is removed with the first call of _Config.logger().
    """
    _NAME = "covidstats"
    _LEVEL_DICT = {0: "ERROR", 1: "WARNING", 2: "INFO", 3: "DEBUG"}

    def __init__(self):
        self._logger = loguru_logger.bind(name=self._NAME)
        self._logger_level = 2
        self._handler_id = None

    @property
    def logger_level(self):
        """int: integer to indicate the logging level
        """
        return self._logger_level

    def logger(self, level):
        """Update configuration of logger.

        Args:
            level (int): log level (0: ERROR, 1: WARNING, 2: INFO, 3: DEBUG)

        Raises:
            KeyError: @level is not in the range of 0-3
        """
        if level not in self._LEVEL_DICT:
            raise KeyError(f"@level must be selected from {sorted(self._LEVEL_DICT)}, but {level} was applied.")
        self._logger.remove(self._handler_id)
        self._handler_id = self._logger.add(
            sys.__stdout__,
            level=self._LEVEL_DICT[level],
            format="{time:YYYY-MM-DD at HH:mm:ss} | {extra[name]} | <level>{level}</level> | <level>{message}</level>",
            filter=lambda record: record["extra"].get("name") == self._NAME,
        )
        self._logger_level = level

    def error(self, message):
        """Logging raised exception.

        Args:
            message (str): message to show
        """
        self._logger.error(message)

    def warning(self, message):
        """Show warning.

        Args:
            message (str): message to show
        """
        self._logger.warning(message)

    def info(self, message):
        """Show information.

        Args:
            message (str): message to show
        """
        self._logger.info(message)

    def debug(self, message):
        """Show debug message.

        Args:
            message (str): message to show
        """
        self._logger.debug(message)


config = _Config()
config.logger(level=2)
