#!/usr/bin/env python
# -*- coding: utf-8 -*-

from pathlib import Path
from covidstats.util.config import config
from covidstats.util.error import UnExpectedValueError
from covidstats.util.term import Term
from covidstats.util.validator import Validator
from covidstats.loading.continent import ContinentIndex
from covidstats.loading.store import TimeSeriesStore


class CaseDataset(Term):
    """Owner of the stores of confirmed/recovered cases and the lookup table of continents.

    Args:
        confirmed (covidstats.TimeSeriesStore): store of confirmed cases
        recovered (covidstats.TimeSeriesStore): store of recovered cases
        continents (covidstats.ContinentIndex or None): lookup table of continents or None (empty)

    Note:
        Un-frozen stores will be frozen.
    """

    def __init__(self, confirmed, recovered, continents=None):
        self._store_dict = {
            self.C: Validator(confirmed, "confirmed").instance(TimeSeriesStore).freeze(),
            self.R: Validator(recovered, "recovered").instance(TimeSeriesStore).freeze(),
        }
        self._continents = ContinentIndex() if continents is None else Validator(
            continents, "continents").instance(ContinentIndex)

    @classmethod
    def from_csv(cls, confirmed=None, recovered=None, continents=None, directory="."):
        """Load the CSV files.

        Args:
            confirmed (str or pathlib.Path or None): path of the table of confirmed cases or None (covid_confirmed.csv)
            recovered (str or pathlib.Path or None): path of the table of recovered cases or None (covid_recovered.csv)
            continents (str or pathlib.Path or None): path of the table of continents or None (countries_to_continent.csv)
            directory (str or pathlib.Path): directory of the files, used when the paths are relative

        Raises:
            FileNotFoundError: a file does not exist

        Returns:
            covidstats.CaseDataset: the dataset
        """
        dir_path = Path(directory)
        confirmed_path = dir_path.joinpath(confirmed or cls.CONFIRMED_FILE)
        recovered_path = dir_path.joinpath(recovered or cls.RECOVERED_FILE)
        continent_path = dir_path.joinpath(continents or cls.CONTINENT_FILE)
        dataset = cls(
            confirmed=TimeSeriesStore.from_csv(confirmed_path, name=cls.C),
            recovered=TimeSeriesStore.from_csv(recovered_path, name=cls.R),
            continents=ContinentIndex.from_csv(continent_path),
        )
        config.info(f"Dataset is ready: {dataset.confirmed!r}, {dataset.recovered!r}")
        return dataset

    @property
    def confirmed(self):
        """covidstats.TimeSeriesStore: store of confirmed cases
        """
        return self._store_dict[self.C]

    @property
    def recovered(self):
        """covidstats.TimeSeriesStore: store of recovered cases
        """
        return self._store_dict[self.R]

    @property
    def continents(self):
        """covidstats.ContinentIndex: lookup table of continents
        """
        return self._continents

    def store(self, metric):
        """Return the store of the metric.

        Args:
            metric (str): "Confirmed" or "Recovered" (case-insensitive)

        Raises:
            UnExpectedValueError: un-expected metric was applied

        Returns:
            covidstats.TimeSeriesStore: the store
        """
        metric_dict = {name.lower(): name for name in self._store_dict}
        name = metric_dict.get(Validator(metric, "metric").str())
        if name is None:
            raise UnExpectedValueError("metric", metric, candidates=self.METRICS)
        return self._store_dict[name]
