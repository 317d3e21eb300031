#!/usr/bin/env python
# -*- coding: utf-8 -*-

import re
from types import MappingProxyType
import pandas as pd
from covidstats.util.config import config
from covidstats.util.error import FrozenStoreError, NotEnoughColumnsError
from covidstats.util.term import Term
from covidstats.util.validator import Validator
from covidstats.loading.continent import ContinentIndex
from covidstats.loading.reader import read_table, cells


class TimeSeriesStore(Term):
    """Index of the number of cases with (date, country, province) keys.

    Args:
        name (str): name of the metric, like "Confirmed"

    Note:
        Dates are opaque labels, the header strings of the source table as-is. "4/16/20" and "04-16-2020" are different dates.

    Note:
        Country names and province names are registered in lower case. Empty province name means no subdivisions.

    Note:
        Records can be added with TimeSeriesStore.ingest() until TimeSeriesStore.freeze() is called.
        TimeSeriesStore.from_table() and TimeSeriesStore.from_csv() return frozen stores.
    """
    _COUNT_PATTERN = re.compile(r"[+-]?[0-9]+")

    def __init__(self, name):
        self._name = str(name)
        # (date, country, province): the number of cases
        self._records = {}
        # date: set of (country, province)
        self._date_keys = {}
        # (country, province) found in the source tables
        self._areas = set()
        self._frozen = False

    @classmethod
    def from_table(cls, table, name):
        """Create a frozen store with a table.

        Args:
            table (pandas.DataFrame): time-series table, refer to TimeSeriesStore.ingest()
            name (str): name of the metric

        Returns:
            covidstats.TimeSeriesStore: the store
        """
        return cls(name=name).ingest(table).freeze()

    @classmethod
    def from_csv(cls, path, name):
        """Create a frozen store with a CSV file.

        Args:
            path (str or pathlib.Path): path of the CSV file
            name (str): name of the metric

        Raises:
            FileNotFoundError: the file does not exist

        Returns:
            covidstats.TimeSeriesStore: the store
        """
        return cls.from_table(read_table(path, name=f"{name} table"), name=name)

    @property
    def name(self):
        """str: name of the metric
        """
        return self._name

    @property
    def frozen(self):
        """bool: whether records cannot be added any more or not
        """
        return self._frozen

    @property
    def records(self):
        """mappingproxy[tuple(str, str, str), int]: read-only view of the records, (date, country, province) as keys
        """
        return MappingProxyType(self._records)

    def ingest(self, table):
        """Register the records of a time-series table.

        Args:
            table (pandas.DataFrame): time-series table
                Index
                    reset index
                Columns
                    - 0th: province names (empty means no subdivisions)
                    - 1st: country names
                    - 2nd, 3rd: not used (latitude and longitude)
                    - the others: the number of cases on the dates, column names are the dates

        Raises:
            FrozenStoreError: the store has already been frozen
            NotEnoughColumnsError: the table does not have the leading columns

        Returns:
            covidstats.TimeSeriesStore: self

        Note:
            Empty cells and non-numeric values are registered as 0.

        Note:
            When a row is shorter than the header, the dates without cells will be skipped.

        Note:
            When the same (date, country, province) appears more than once, the last value is used.
        """
        if self._frozen:
            raise FrozenStoreError(name=self._name)
        df = Validator(table, "table").dataframe()
        columns = [str(col) for col in df.columns]
        if len(columns) < self.DATE_COLUMN_OFFSET:
            raise NotEnoughColumnsError(name=f"{self._name} table", columns=columns, required_n=self.DATE_COLUMN_OFFSET)
        dates = [col.strip() for col in columns[self.DATE_COLUMN_OFFSET:]]
        for row in df.itertuples(index=False, name=None):
            values = cells(row)
            if len(values) <= self.COUNTRY_COLUMN:
                continue
            province = values[self.PROVINCE_COLUMN].strip().lower()
            country = values[self.COUNTRY_COLUMN].strip().lower()
            self._areas.add((country, province))
            for (date, value) in zip(dates, values[self.DATE_COLUMN_OFFSET:]):
                self._register(date, country, province, self._parse_count(value))
        config.debug(f"{self._name}: {len(self._records)} records of {len(self._date_keys)} dates")
        return self

    def _parse_count(self, value):
        """Convert a cell to the number of cases.

        Args:
            value (str): value of the cell

        Returns:
            int: the number of cases, 0 when the cell is empty or non-numeric
        """
        stripped = value.strip()
        if not stripped:
            return 0
        if self._COUNT_PATTERN.fullmatch(stripped) is None:
            config.debug(f"{self._name}: '{value}' was registered as 0 because it is not an integer")
            return 0
        return int(stripped)

    def _register(self, date, country, province, count):
        self._records[(date, country, province)] = count
        self._date_keys.setdefault(date, set()).add((country, province))

    def freeze(self):
        """Stop accepting records.

        Returns:
            covidstats.TimeSeriesStore: self
        """
        self._frozen = True
        return self

    def dates(self):
        """Return the dates with records.

        Returns:
            list[str]: dates in the order of registration
        """
        return list(self._date_keys)

    def countries(self):
        """Return the country names found in the source tables.

        Returns:
            list[str]: sorted lower-cased country names
        """
        return sorted({country for (country, _) in self._areas})

    def provinces(self, country=None):
        """Return the province names found in the source tables.

        Args:
            country (str or None): country name (case-insensitive) or None (all countries)

        Returns:
            list[str]: sorted lower-cased province names, including "" (no subdivisions) if registered
        """
        target = Validator(country, "country").str()
        return sorted({province for (_country, province) in self._areas if target is None or _country == target})

    def total(self, date):
        """Return the total number of cases in the world on the date.

        Args:
            date (str): date label, as-is the header of the source table

        Returns:
            int: the total number, 0 when the date is not registered
        """
        return sum(self._records[(date, *key)] for key in self._date_keys.get(date, ()))

    def total_by_continent(self, date, index, continent):
        """Return the total number of cases in the continent on the date.

        Args:
            date (str): date label, as-is the header of the source table
            index (covidstats.ContinentIndex): lookup table of continents
            continent (str): continent name (case-insensitive)

        Returns:
            int: the total number, 0 when the date is not registered or no countries are in the continent

        Note:
            Countries which are not registered in @index are regarded as in "Unknown" continent.
        """
        Validator(index, "index").instance(ContinentIndex)
        target = Validator(continent, "continent").str()
        return sum(
            self._records[(date, country, province)] for (country, province) in self._date_keys.get(date, ())
            if index.continent_of(country).lower() == target)

    def total_by_country(self, date, country):
        """Return the total number of cases in the country on the date.

        Args:
            date (str): date label, as-is the header of the source table
            country (str): country name (case-insensitive)

        Returns:
            int: the total number of the provinces, 0 when the date or the country is not registered
        """
        target = Validator(country, "country").str()
        return sum(
            self._records[(date, _country, province)] for (_country, province) in self._date_keys.get(date, ())
            if _country == target)

    def total_by_province(self, date, country, province):
        """Return the number of cases in the province on the date.

        Args:
            date (str): date label, as-is the header of the source table
            country (str): country name (case-insensitive)
            province (str): province name (case-insensitive), "" means no subdivisions

        Returns:
            int: the number of cases, 0 when the date, the country or the province is not registered
        """
        key = (date, Validator(country, "country").str(), Validator(province, "province").str())
        return self._records.get(key, 0)

    def to_frame(self):
        """Return the records as a dataframe.

        Returns:
            pandas.DataFrame:
                Index
                    reset index
                Columns
                    - Date (str): date labels
                    - Country (str): lower-cased country names
                    - Province (str): lower-cased province names
                    - (int): the number of cases, column name is the name of the store
        """
        columns = [self.DATE, *self.AREA_COLUMNS, self._name]
        df = pd.DataFrame([(*key, count) for (key, count) in self._records.items()], columns=columns)
        return df.astype({self._name: "int64"})

    def __len__(self):
        return len(self._records)

    def __repr__(self):
        return f"<TimeSeriesStore: {self._name}, {len(self._records):,} records>"
