import pandas as pd
import pytest
from covidstats import read_table
from covidstats.loading.reader import cells


def test_read_table(data_dir):
    df = read_table(data_dir.joinpath("covid_confirmed.csv"))
    assert df.columns.tolist() == ["Province/State", "Country/Region", "Lat", "Long", "1/22/20", "1/23/20"]
    assert len(df) == 7
    assert df.loc[0, "Country/Region"] == "China"
    assert df.loc[2, "Province/State"] == ""
    assert df.loc[5, "Country/Region"] == "Korea, South"
    assert df.loc[4, "1/23/20"] == "x"


def test_read_long_rows(tmp_path):
    path = tmp_path.joinpath("long.csv")
    path.write_text("Province,Country,Lat,Long,1/22/20\nHubei,China,0,0,444,999\n,Japan,0,0,2\n")
    df = read_table(path)
    assert df.columns.tolist() == ["Province", "Country", "Lat", "Long", "1/22/20"]
    assert df["1/22/20"].tolist() == ["444", "2"]


def test_read_duplicated_header(tmp_path):
    path = tmp_path.joinpath("duplicated.csv")
    path.write_text("Province,Country,Lat,Long,1/22/20,1/22/20\nHubei,China,0,0,1,2\n")
    df = read_table(path)
    assert df.columns.tolist() == ["Province", "Country", "Lat", "Long", "1/22/20", "1/22/20"]
    assert [list(row) for row in df.itertuples(index=False, name=None)] == [["Hubei", "China", "0", "0", "1", "2"]]


def test_read_header_only(tmp_path):
    path = tmp_path.joinpath("header.csv")
    path.write_text("Country,Continent\n")
    df = read_table(path)
    assert df.empty
    assert df.columns.tolist() == ["Country", "Continent"]


def test_read_not_found(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_table(tmp_path.joinpath("not_found.csv"))


@pytest.mark.parametrize(
    "row, expected",
    [
        (["a", "b", "c"], ["a", "b", "c"]),
        (["a", "", "c"], ["a", "", "c"]),
        (["a", "b", None, float("nan")], ["a", "b"]),
        (["a", None, "c"], ["a", "", "c"]),
        ((), []),
        ([None], []),
    ]
)
def test_cells(row, expected):
    assert cells(row) == expected


def test_cells_of_dataframe():
    df = pd.DataFrame([["a", "b"], ["c", None]], columns=["x", "y"])
    assert [cells(row) for row in df.itertuples(index=False, name=None)] == [["a", "b"], ["c"]]
