from loguru import logger
import pytest
from covidstats import config, MissingDateError, NotEnoughColumnsError, FrozenStoreError, UnExpectedValueError


@pytest.mark.parametrize("level", [0, 1, 2, 3])
def test_logger(level):
    config.logger(level=level)
    assert config.logger_level == level
    config.info("info")
    config.debug("debug")
    config.warning("warning")
    config.logger(level=2)


def test_logger_wrong_level():
    with pytest.raises(KeyError):
        config.logger(level=4)
    assert config.logger_level == 2


@pytest.mark.parametrize(
    "error, message",
    [
        (MissingDateError(), "Please specify date parameter."),
        (MissingDateError(query="country=china"), "Please specify date parameter in 'country=china'."),
        (FrozenStoreError(name="Confirmed"), "Records cannot be added to 'Confirmed' store because it has already been frozen."),
        (NotEnoughColumnsError("table", ["a", "b"], 4), "'table' must have 4 columns before date columns, but the header has only 2 columns."),
        (UnExpectedValueError("metric", "Fatal", ["Confirmed", "Recovered"]),
         "'metric' must be selected from [Confirmed, Recovered], but Fatal was applied."),
    ]
)
def test_error_message(error, message):
    assert str(error) == message


def test_missing_date_not_logged_as_error(capfd):
    config.logger(level=1)
    capfd.readouterr()
    MissingDateError()
    FrozenStoreError(name="Confirmed")
    out = capfd.readouterr().out
    assert "date was not specified" not in out
    assert "ERROR" in out and "Confirmed store is frozen" in out
    config.logger(level=2)


def test_bound_logger(capfd):
    config.logger(level=2)
    capfd.readouterr()
    config.info("loaded")
    logger.info("message of another library")
    out = capfd.readouterr().out
    assert "| covidstats | INFO | loaded" in out
    assert "message of another library" not in out
