import pytest
from covidstats import CaseDataset, QueryResolver

CONFIRMED_CSV = """Province/State,Country/Region,Lat,Long,1/22/20,1/23/20
Hubei,China,30.9756,112.2707,444,444
Beijing,China,40.1824,116.4142,14,22
,Japan,36.0,138.0,2,1
,United Kingdom,55.3781,-3.436,0,0
Bermuda,United Kingdom,32.3078,-64.7505,,x
,"Korea, South",35.9078,127.7669,1,1
,Atlantis,0.0,0.0,5,7
"""

RECOVERED_CSV = """Province/State,Country/Region,Lat,Long,1/22/20,1/23/20
Hubei,China,30.9756,112.2707,28,30
Beijing,China,40.1824,116.4142,0,0
,Japan,36.0,138.0,0,0
,Atlantis,0.0,0.0,1,2
"""

CONTINENT_CSV = """Country,Continent
China,Asia
Japan,Asia
United Kingdom,Europe
"Korea, South",Asia
"""


@pytest.fixture(scope="function")
def data_dir(tmp_path):
    tmp_path.joinpath("covid_confirmed.csv").write_text(CONFIRMED_CSV)
    tmp_path.joinpath("covid_recovered.csv").write_text(RECOVERED_CSV)
    tmp_path.joinpath("countries_to_continent.csv").write_text(CONTINENT_CSV)
    return tmp_path


@pytest.fixture(scope="function")
def dataset(data_dir):
    return CaseDataset.from_csv(directory=data_dir)


@pytest.fixture(scope="function")
def resolver(dataset):
    return QueryResolver(dataset)
