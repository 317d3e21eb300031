#!/usr/bin/env python
# -*- coding: utf-8 -*-

from decimal import Decimal, ROUND_HALF_UP
from covidstats.util.config import config
from covidstats.util.error import MissingDateError
from covidstats.util.term import Term
from covidstats.util.validator import Validator
from covidstats.aggregation.engine import AggregationEngine
from covidstats.loading.dataset import CaseDataset
from covidstats.query.params import QueryParams


class QueryResult(Term):
    """Result of a query.

    Args:
        confirmed (int): the number of confirmed cases
        recovered (int): the number of recovered cases
        type (str): "confirmed", "recovered" or the others (both)
    """

    def __init__(self, confirmed, recovered, type="both"):
        self._confirmed = Validator(confirmed, "confirmed").int()
        self._recovered = Validator(recovered, "recovered").int()
        self._type = str(type)

    @property
    def confirmed(self):
        """int: the number of confirmed cases
        """
        return self._confirmed

    @property
    def recovered(self):
        """int: the number of recovered cases
        """
        return self._recovered

    @property
    def type(self):
        """str: output type
        """
        return self._type

    @property
    def recovery_ratio(self):
        """float: recovered / confirmed, 0.0 when the number of confirmed cases is 0
        """
        if self._confirmed == 0:
            return 0.0
        return self._recovered / self._confirmed

    def format(self):
        """Return the result as a string.

        Returns:
            str: like "recovered=30, confirmed=444, recovery_ratio=0.07"
        """
        if self._type == self.T_CONFIRMED:
            values = f"confirmed={self._confirmed}"
        elif self._type == self.T_RECOVERED:
            values = f"recovered={self._recovered}"
        else:
            values = f"recovered={self._recovered}, confirmed={self._confirmed}"
        ratio = Decimal(repr(self.recovery_ratio)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        return f"{values}, recovery_ratio={ratio}"

    def __str__(self):
        return self.format()

    def __repr__(self):
        return f"QueryResult(confirmed={self._confirmed}, recovered={self._recovered}, type={self._type!r})"


class QueryResolver(Term):
    """Answer queries with the dataset.

    Args:
        dataset (covidstats.CaseDataset): dataset of confirmed/recovered cases and continents

    Examples:
        >>> resolver = QueryResolver(CaseDataset.from_csv(directory="input"))
        >>> print(resolver.query("date=1/23/20, country=china"))
        recovered=30, confirmed=444, recovery_ratio=0.07
    """

    def __init__(self, dataset):
        self._dataset = Validator(dataset, "dataset").instance(CaseDataset)
        self._engine = AggregationEngine(continents=dataset.continents)

    def resolve(self, params):
        """Calculate the numbers of cases with the parameters.

        Args:
            params (covidstats.QueryParams): parameters of the query

        Raises:
            MissingDateError: date was not specified

        Returns:
            covidstats.QueryResult: the result
        """
        Validator(params, "params").instance(QueryParams)
        if params.date is None:
            raise MissingDateError(details=f"{params!r} was applied")
        kwargs = {"date": params.date, "continent": params.continent, "country": params.country, "province": params.province}
        confirmed = self._engine.total(self._dataset.confirmed, **kwargs)
        recovered = self._engine.total(self._dataset.recovered, **kwargs)
        config.debug(f"{params!r}: confirmed={confirmed}, recovered={recovered}")
        return QueryResult(confirmed=confirmed, recovered=recovered, type=params.type)

    def query(self, raw):
        """Parse the query line and calculate the numbers of cases.

        Args:
            raw (str): query, like "date=1/23/20, country=china"

        Raises:
            MissingDateError: date was not specified

        Returns:
            covidstats.QueryResult: the result
        """
        return self.resolve(QueryParams.parse(raw))
