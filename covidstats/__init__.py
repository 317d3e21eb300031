# flake8: noqa

# version
from covidstats.__version__ import __version__
# util
from covidstats.util.config import config
from covidstats.util.error import UnExpectedTypeError, UnExpectedValueError
from covidstats.util.error import NotEnoughColumnsError, MissingDateError, FrozenStoreError
from covidstats.util.validator import Validator
from covidstats.util.term import Term
# loading
from covidstats.loading.reader import read_table
from covidstats.loading.continent import ContinentIndex
from covidstats.loading.store import TimeSeriesStore
from covidstats.loading.dataset import CaseDataset
# aggregation
from covidstats.aggregation.engine import AggregationEngine
# query
from covidstats.query.params import QueryParams
from covidstats.query.resolver import QueryResult, QueryResolver


def get_version():
    """
    Return the version number, like covidstats v0.0.0

    Returns:
        str
    """
    return f"covidstats v{__version__}"
