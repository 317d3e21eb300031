#!/usr/bin/env python
# -*- coding: utf-8 -*-

from covidstats.util.config import config
from covidstats.util.term import Term
from covidstats.util.validator import Validator
from covidstats.loading.continent import ContinentIndex
from covidstats.loading.store import TimeSeriesStore


class AggregationEngine(Term):
    """Calculate the total number of cases at the granularity selected with the specified area names.

    Args:
        continents (covidstats.ContinentIndex): lookup table of continents

    Note:
        Granularity is selected with the following order.
        1. continent: when continent name is specified (country/province names will be ignored)
        2. province: when both of country name and province name are specified
        3. country: when country name is specified
        4. global: otherwise
    """

    def __init__(self, continents):
        self._continents = Validator(continents, "continents").instance(ContinentIndex)

    @classmethod
    def granularity(cls, continent=None, country=None, province=None):
        """Return the granularity selected with the area names.

        Args:
            continent (str or None): continent name
            country (str or None): country name
            province (str or None): province name

        Returns:
            str: "continent", "province", "country" or "global"
        """
        if continent is not None:
            return cls.CONTINENT_LEVEL
        if country is not None and province is not None:
            return cls.PROVINCE_LEVEL
        if country is not None:
            return cls.COUNTRY_LEVEL
        return cls.GLOBAL

    def total(self, store, date, continent=None, country=None, province=None):
        """Return the total number of cases on the date in the area.

        Args:
            store (covidstats.TimeSeriesStore): store of the metric
            date (str): date label
            continent (str or None): continent name
            country (str or None): country name
            province (str or None): province name

        Returns:
            int: the total number, 0 when no records were found
        """
        Validator(store, "store").instance(TimeSeriesStore)
        level = self.granularity(continent=continent, country=country, province=province)
        config.debug(f"{store.name} on {date}: aggregated at {level} level")
        if level == self.CONTINENT_LEVEL:
            return store.total_by_continent(date, self._continents, continent)
        if level == self.PROVINCE_LEVEL:
            return store.total_by_province(date, country, province)
        if level == self.COUNTRY_LEVEL:
            return store.total_by_country(date, country)
        return store.total(date)
