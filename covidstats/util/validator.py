#!/usr/bin/env python
# -*- coding: utf-8 -*-

import pandas as pd
from covidstats.util.error import UnExpectedTypeError, UnExpectedValueError


class Validator(object):
    """Validate objects and arguments.

    Args:
        target (object): target object to validate
        name (str): name of the target shown in error code
        accept_none (str): whether accept None as the target value or not

    Raises:
        UnExpectedTypeError: @accept_none is False, but @target is None

    Note:
        When @accept_none is True and @target is None, default values will be returned with instance methods.
    """

    def __init__(self, target, name="target", accept_none=True):
        self._target = target
        self._name = str(name)
        if target is None and not accept_none:
            raise UnExpectedTypeError(self._name, target, object, details="None is not accepted")

    def instance(self, expected):
        """Ensure that the target is an instance of a specified class.

        Args:
            expected (object): expected class or sequence of expected classes

        Raises:
            UnExpectedTypeError: the target is not an instance of the class

        Returns:
            object: the target itself
        """
        if isinstance(self._target, expected):
            return self._target
        raise UnExpectedTypeError(self._name, self._target, expected)

    def dataframe(self):
        """Ensure the target is a dataframe.

        Raises:
            UnExpectedTypeError: the target is not a dataframe

        Returns:
            pandas.DataFrame: copy of the target
        """
        if not isinstance(self._target, pd.DataFrame):
            raise UnExpectedTypeError(self._name, self._target, pd.DataFrame)
        return self._target.copy()

    def int(self, default=None, candidates=None):
        """Convert a value to an integer.

        Args:
            default (int or None): default value when the target is None
            candidates (list[int] or None): list of candidates or None (no limitations)

        Raises:
            UnExpectedTypeError: the target cannot be converted to an integer
            UnExpectedValueError: the value is not included in the candidates

        Returns:
            int or None: converted value or None (when both of the target and @default are None)
        """
        if self._target is None:
            return None if default is None else Validator(default, name="default").int(candidates=candidates)
        try:
            value = int(self._target)
        except (ValueError, TypeError):
            raise UnExpectedTypeError(self._name, self._target, int) from None
        if candidates is None or value in candidates:
            return value
        raise UnExpectedValueError(self._name, value, candidates)

    def str(self, default=None):
        """Ensure the target is a string and normalize it as a lookup key (trimmed and lower-cased).

        Args:
            default (str or None): default value when the target is None

        Raises:
            UnExpectedTypeError: the target is not a string

        Returns:
            str or None: normalized string or None (when both of the target and @default are None)
        """
        if self._target is None:
            return None if default is None else Validator(default, name="default").str()
        return self.instance(str).strip().lower()
