from __future__ import annotations


class Term(object):
    """
    Term definition.
    """
    # Metrics
    C: str = "Confirmed"
    R: str = "Recovered"
    METRICS: list[str] = [C, R]
    RATIO: str = "Recovery ratio"
    # Column names
    DATE: str = "Date"
    COUNTRY: str = "Country"
    PROVINCE: str = "Province"
    CONTINENT: str = "Continent"
    AREA_COLUMNS: list[str] = [COUNTRY, PROVINCE]
    # Layout of time-series tables: province, country, latitude, longitude, dates...
    PROVINCE_COLUMN: int = 0
    COUNTRY_COLUMN: int = 1
    DATE_COLUMN_OFFSET: int = 4
    # Granularity of aggregation
    GLOBAL: str = "global"
    CONTINENT_LEVEL: str = "continent"
    COUNTRY_LEVEL: str = "country"
    PROVINCE_LEVEL: str = "province"
    # Query keys
    Q_DATE: str = "date"
    Q_CONTINENT: str = "continent"
    Q_COUNTRY: str = "country"
    Q_PROVINCE: str = "province"
    Q_TYPE: str = "type"
    Q_ALIASES: dict[str, str] = {
        Q_DATE: Q_DATE, Q_CONTINENT: Q_CONTINENT, Q_COUNTRY: Q_COUNTRY,
        "state": Q_PROVINCE, Q_PROVINCE: Q_PROVINCE, Q_TYPE: Q_TYPE,
    }
    # Output types
    T_CONFIRMED: str = "confirmed"
    T_RECOVERED: str = "recovered"
    T_BOTH: str = "both"
    # Default filenames of the input tables
    CONFIRMED_FILE: str = "covid_confirmed.csv"
    RECOVERED_FILE: str = "covid_recovered.csv"
    CONTINENT_FILE: str = "countries_to_continent.csv"
    # Flag
    UNKNOWN: str = "Unknown"
