import pytest
from covidstats import QueryParams, UnExpectedTypeError


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("date=1/23/20", QueryParams(date="1/23/20")),
        (" DATE = 1/23/20 , Country = China ", QueryParams(date="1/23/20", country="china")),
        ("date=1/23/20, country=china, state=Hubei", QueryParams(date="1/23/20", country="china", province="hubei")),
        ("date=1/23/20, country=china, province=hubei", QueryParams(date="1/23/20", country="china", province="hubei")),
        ("date=1/1/21, continent=Europe", QueryParams(date="1/1/21", continent="europe")),
        ("date=1/23/20, type=Confirmed", QueryParams(date="1/23/20", type="confirmed")),
        ("date=1/23/20, type=deaths", QueryParams(date="1/23/20", type="deaths")),
        ("date=1/23/20, city=wuhan, foo", QueryParams(date="1/23/20")),
        ("date=1/22/20, date=1/23/20", QueryParams(date="1/23/20")),
        ("date=a=b", QueryParams(date="a=b")),
        ("country=china", QueryParams(country="china")),
        ("", QueryParams()),
    ]
)
def test_parse(raw, expected):
    assert QueryParams.parse(raw) == expected


def test_default():
    params = QueryParams()
    assert params.date is None
    assert params.continent is None
    assert params.country is None
    assert params.province is None
    assert params.type == "both"
    assert params.to_dict() == {"date": None, "continent": None, "country": None, "province": None, "type": "both"}


def test_repr():
    params = QueryParams.parse("date=1/23/20, country=china")
    assert repr(params) == "QueryParams(date='1/23/20', country='china', type='both')"
    assert params != "date=1/23/20, country=china"


def test_wrong_types():
    with pytest.raises(UnExpectedTypeError):
        QueryParams.parse(None)
    with pytest.raises(UnExpectedTypeError):
        QueryParams(date=20200123)
