#!/usr/bin/env python
# -*- coding: utf-8 -*-

from covidstats.util.term import Term
from covidstats.util.validator import Validator


class QueryParams(Term):
    """Parameters of a query.

    Args:
        date (str or None): date label
        continent (str or None): continent name
        country (str or None): country name
        province (str or None): province/state name
        type (str): "confirmed", "recovered" or "both", the other values are regarded as "both" when formatting

    Note:
        Values will be stripped and lower-cased.
    """

    def __init__(self, date=None, continent=None, country=None, province=None, type="both"):
        self._date = Validator(date, "date").str()
        self._continent = Validator(continent, "continent").str()
        self._country = Validator(country, "country").str()
        self._province = Validator(province, "province").str()
        self._type = Validator(type, "type").str(default=self.T_BOTH)

    @classmethod
    def parse(cls, raw):
        """Parse a query line.

        Args:
            raw (str): query, like "date=1/23/20, country=china, type=confirmed"

        Returns:
            covidstats.QueryParams: parsed parameters

        Note:
            Segments are separated with "," and keys/values with the first "=".
            Keys are case-insensitive and "state" is an alias of "province".

        Note:
            Segments without "=" and un-recognized keys will be ignored.
            When a key appears more than once, the last value will be used.
        """
        kwargs = {}
        for segment in Validator(raw, "query", accept_none=False).instance(str).split(","):
            key, sep, value = segment.partition("=")
            if not sep:
                continue
            name = cls.Q_ALIASES.get(key.strip().lower())
            if name is not None:
                kwargs[name] = value.strip().lower()
        return cls(**kwargs)

    @property
    def date(self):
        """str or None: date label
        """
        return self._date

    @property
    def continent(self):
        """str or None: continent name
        """
        return self._continent

    @property
    def country(self):
        """str or None: country name
        """
        return self._country

    @property
    def province(self):
        """str or None: province name
        """
        return self._province

    @property
    def type(self):
        """str: output type
        """
        return self._type

    def to_dict(self):
        """Return the parameters as a dictionary.

        Returns:
            dict[str, str or None]: date, continent, country, province and type
        """
        return {
            self.Q_DATE: self._date, self.Q_CONTINENT: self._continent, self.Q_COUNTRY: self._country,
            self.Q_PROVINCE: self._province, self.Q_TYPE: self._type,
        }

    def __eq__(self, other):
        if not isinstance(other, QueryParams):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        items = ", ".join(f"{k}={v!r}" for (k, v) in self.to_dict().items() if v is not None)
        return f"QueryParams({items})"
