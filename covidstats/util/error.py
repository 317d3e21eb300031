#!/usr/bin/env python
# -*- coding: utf-8 -*-

from covidstats.util.config import config


class _BaseException(Exception):
    """Basic class of exception.

    Args:
        message (str): main message of error, should be set in child classes
        details (str or None): details of error
        log (str): description used by logger
        log_level (str): "error", "warning", "info" or "debug", level of the log
    """

    def __init__(self, message, details=None, log="exception raised", log_level="error"):
        getattr(config, log_level)(log)
        self._message = str(message)
        self._details = "" if details is None else f" {details}."

    def __str__(self):
        return f"{self._message}.{self._details}"


class _ValidationError(_BaseException):
    """Basic class of exception raised when validation.

    Args:
        name (str): name of the target
        message (str): main message of error, should be set in child classes
        details (str or None): details of error
    """

    def __init__(self, name, message, details=None):
        log = f"validation of {name} failed"
        super().__init__(message=message, details=details, log=log)


class UnExpectedTypeError(_ValidationError):
    """Error when an object cannot be converted to an instance un-expectedly.

    Args:
        name (str): name of the target
        target (object): target object
        expected (object): expected type
        details (str or None): details of error
    """

    def __init__(self, name, target, expected, details=None):
        message = f"We could not convert '{name}' to an instance of {expected} because that of {type(target)} was applied"
        super().__init__(name=name, message=message, details=details)


class UnExpectedValueError(_ValidationError):
    """
    Error when unexpected value was applied as the value of an argument.

    Args:
        name (str): argument name
        value (object): value user applied
        candidates (list[object]): candidates of the argument
        details (str or None): details of error
    """

    def __init__(self, name, value, candidates, details=None):
        c_str = ", ".join(str(candidate) for candidate in candidates)
        message = f"'{name}' must be selected from [{c_str}], but {value} was applied"
        super().__init__(name=name, message=message, details=details)


class NotEnoughColumnsError(_ValidationError):
    """Error when the header of a time-series table does not have the fixed leading columns.

    Args:
        name (str): name of the table
        columns (list[str]): header of the table
        required_n (int): the number of columns which precede date columns
        details (str or None): details of error
    """

    def __init__(self, name, columns, required_n, details=None):
        message = f"'{name}' must have {required_n} columns before date columns, but the header has only {len(columns)} columns"
        super().__init__(name=name, message=message, details=details)


class MissingDateError(_BaseException):
    """Error when a query does not specify the date.

    Args:
        query (str or None): the query which lacks date
        details (str or None): details of error
    """

    def __init__(self, query=None, details=None):
        message = "Please specify date parameter" if query is None else f"Please specify date parameter in '{query}'"
        super().__init__(message=message, details=details, log="date was not specified in the query", log_level="debug")


class FrozenStoreError(_BaseException):
    """Error when records are added to a store which has already been frozen.

    Args:
        name (str): name of the store
        details (str or None): details of error
    """

    def __init__(self, name, details=None):
        message = f"Records cannot be added to '{name}' store because it has already been frozen"
        super().__init__(message=message, details=details, log=f"{name} store is frozen")
