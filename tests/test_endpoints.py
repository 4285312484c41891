from datetime import date

import pytest

from currconv import endpoints, models
from currconv.errors import ValidationError


def _query(endpoint):
    params = []
    endpoint.build_query(params)
    return params


def test_endpoint_table():
    req = models.ConvertRequest(pairs=["USD_MYR"])
    hreq = models.ConvertHistoricalRequest(pairs=["USD_MYR"], date=date(2023, 2, 14))

    table = {
        "convert": endpoints.convert(req),
        "convert_compact": endpoints.convert_compact(req),
        "convert_historical": endpoints.convert_historical(hreq),
        "convert_historical_compact": endpoints.convert_historical_compact(hreq),
        "currencies": endpoints.currencies(),
        "countries": endpoints.countries(),
        "usage": endpoints.usage(),
    }

    assert {k: (e.path, e.api_prefixed) for k, e in table.items()} == {
        "convert": ("convert", True),
        "convert_compact": ("convert", True),
        "convert_historical": ("convert", True),
        "convert_historical_compact": ("convert", True),
        "currencies": ("currencies", True),
        "countries": ("countries", True),
        "usage": ("others/usage", False),
    }
    assert table["convert"].shape is models.Convert
    assert table["convert_compact"].shape == models.ConvertCompact
    assert table["usage"].shape is models.Usage


def test_listing_endpoints_add_no_params():
    for e in (endpoints.currencies(), endpoints.countries(), endpoints.usage()):
        assert _query(e) == []


def test_convert_query_joins_pairs():
    e = endpoints.convert(models.ConvertRequest(pairs=("USD_MYR", "MYR_USD", "EUR_JPY")))
    assert _query(e) == [("q", "USD_MYR,MYR_USD,EUR_JPY")]


def test_single_pair_string_is_not_split():
    e = endpoints.convert_compact(models.ConvertRequest(pairs="USD_MYR"))
    assert _query(e) == [("q", "USD_MYR"), ("compact", "ultra")]


@pytest.mark.parametrize("pairs", [[], (), "", None])
def test_empty_pairs_rejected(pairs):
    e = endpoints.convert(models.ConvertRequest(pairs=pairs))
    with pytest.raises(ValidationError):
        _query(e)


def test_missing_date_rejected_even_with_pairs():
    e = endpoints.convert_historical(models.ConvertHistoricalRequest(pairs=["USD_MYR"]))
    with pytest.raises(ValidationError, match="date"):
        _query(e)


def test_historical_query_with_range():
    e = endpoints.convert_historical_compact(
        models.ConvertHistoricalRequest(
            pairs=["USD_MYR"], date=date(2023, 1, 5), end_date=date(2023, 1, 9)
        )
    )
    assert _query(e) == [
        ("q", "USD_MYR"),
        ("compact", "ultra"),
        ("date", "2023-01-05"),
        ("endDate", "2023-01-09"),
    ]


def test_format_date_pads():
    assert endpoints.format_date(date(2023, 2, 4)) == "2023-02-04"
