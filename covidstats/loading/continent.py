#!/usr/bin/env python
# -*- coding: utf-8 -*-

from types import MappingProxyType
from covidstats.util.config import config
from covidstats.util.term import Term
from covidstats.util.validator import Validator
from covidstats.loading.reader import read_table, cells


class ContinentIndex(Term):
    """Lookup table of continent names with country names.

    Args:
        mapping (dict[str, str] or None): country names and continent names or None (empty)

    Note:
        Country names are case-insensitive and continent names keep their case.

    Examples:
        >>> index = ContinentIndex({"China": "Asia"})
        >>> index.continent_of("CHINA")
        'Asia'
        >>> index.continent_of("Atlantis")
        'Unknown'
    """

    def __init__(self, mapping=None):
        _dict = Validator(mapping, "mapping").instance(dict) if mapping is not None else {}
        self._dict = {Validator(country, "country").str(): str(continent).strip() for (country, continent) in _dict.items()}

    @classmethod
    def load(cls, rows):
        """Create an index with the rows of a table.

        Args:
            rows (list[list[str]]): the header row followed by rows of country name, continent name and optional fields

        Returns:
            covidstats.ContinentIndex: the index

        Note:
            The first row is regarded as the header and skipped.
            Rows which do not have continent names are ignored without errors.
        """
        mapping = {}
        for row in list(rows)[1:]:
            values = cells(row)
            if len(values) < 2 or not values[1].strip():
                continue
            mapping[values[0].strip().lower()] = values[1].strip()
        return cls(mapping)

    @classmethod
    def from_csv(cls, path):
        """Create an index with a CSV file.

        Args:
            path (str or pathlib.Path): path of the CSV file which has a header row and country/continent columns

        Returns:
            covidstats.ContinentIndex: the index
        """
        df = read_table(path, name="continent table")
        index = cls.load([df.columns.tolist(), *df.values.tolist()])
        config.info(f"Registered continents of {len(index)} countries")
        return index

    def continent_of(self, country):
        """Return the continent of the country.

        Args:
            country (str): country name (case-insensitive)

        Returns:
            str: continent name or "Unknown" (not registered)
        """
        return self._dict.get(str(country).strip().lower(), self.UNKNOWN)

    def continents(self):
        """Return the registered continent names.

        Returns:
            list[str]: sorted unique continent names
        """
        return sorted(set(self._dict.values()))

    def all(self):
        """Return all records.

        Returns:
            mappingproxy[str, str]: lower-cased country names and continent names
        """
        return MappingProxyType(self._dict)

    def __len__(self):
        return len(self._dict)

    def __contains__(self, country):
        return str(country).strip().lower() in self._dict
