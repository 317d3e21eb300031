#!/usr/bin/env python
# -*- coding: utf-8 -*-

import argparse
import sys
from covidstats.util.config import config
from covidstats.util.error import MissingDateError
from covidstats.util.term import Term
from covidstats.loading.dataset import CaseDataset
from covidstats.query.resolver import QueryResolver

BANNER = """COVID-19 Stats CLI
Type your query. For example:
date=4/16/20, country=united kingdom
date=4/19/20, country=china, state=shanghai
date=1/1/21, continent=europe
You may also specify 'type=confirmed', 'type=recovered', or 'type=both'.
Press Enter to exit."""
PROMPT = "\nEnter Query: "
MISSING_DATE_MESSAGE = "Please specify date parameter."


def _parser():
    parser = argparse.ArgumentParser(
        prog="covidstats", description="Answer queries of the number of confirmed/recovered cases.")
    parser.add_argument("--confirmed", default=Term.CONFIRMED_FILE, help="CSV file of confirmed cases")
    parser.add_argument("--recovered", default=Term.RECOVERED_FILE, help="CSV file of recovered cases")
    parser.add_argument("--continents", default=Term.CONTINENT_FILE, help="CSV file of countries and continents")
    parser.add_argument("--directory", default=".", help="directory of the CSV files")
    parser.add_argument(
        "--verbose", type=int, default=1, choices=[0, 1, 2, 3],
        help="log level (0: ERROR, 1: WARNING, 2: INFO, 3: DEBUG)")
    return parser


def run(resolver, lines, output=print):
    """Answer the queries until an empty line is applied.

    Args:
        resolver (covidstats.QueryResolver): resolver of queries
        lines (iter[str]): query lines
        output (callable): function to show messages

    Returns:
        int: the number of answered queries
    """
    n_answered = 0
    for line in lines:
        query = line.strip()
        if not query:
            break
        try:
            result = resolver.query(query)
        except MissingDateError:
            output(MISSING_DATE_MESSAGE)
            continue
        output(result.format())
        n_answered += 1
    return n_answered


def _input_lines():
    while True:
        try:
            yield input(PROMPT)
        except EOFError:
            return


def main(argv=None):
    """Load the CSV files and start the interactive session.

    Args:
        argv (list[str] or None): command line arguments or None (sys.argv)

    Returns:
        int: exit code
    """
    args = _parser().parse_args(argv)
    config.logger(level=args.verbose)
    dataset = CaseDataset.from_csv(
        confirmed=args.confirmed, recovered=args.recovered, continents=args.continents, directory=args.directory)
    print(BANNER)
    run(QueryResolver(dataset), _input_lines())
    return 0


if __name__ == "__main__":
    sys.exit(main())
