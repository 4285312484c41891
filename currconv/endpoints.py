"""
Per-endpoint request records.

Each factory returns an `Endpoint` describing where the request goes, which
result shape the body decodes into, and how query parameters are added. The
query builder validates the request and raises `ValidationError` before the
executor touches the network.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, List, Tuple

from . import models
from .errors import ValidationError

QueryParams = List[Tuple[str, str]]

DATE_FORMAT = "%Y-%m-%d"


def _no_params(params: QueryParams) -> None:
    return None


@dataclass(frozen=True)
class Endpoint:
    path: str
    api_prefixed: bool
    shape: Any
    build_query: Callable[[QueryParams], None] = _no_params


def format_date(d: date) -> str:
    return d.strftime(DATE_FORMAT)


def _require_pairs(pairs) -> str:
    if isinstance(pairs, str):
        pairs = [pairs] if pairs else []
    if not pairs:
        raise ValidationError("`pairs` require at least one currency conversion")
    return ",".join(pairs)


def _convert_query(req: models.ConvertRequest, compact: bool) -> Callable[[QueryParams], None]:
    def build(params: QueryParams) -> None:
        q = _require_pairs(req.pairs)
        params.append(("q", q))
        if compact:
            params.append(("compact", "ultra"))

    return build


def _historical_query(req: models.ConvertHistoricalRequest, compact: bool) -> Callable[[QueryParams], None]:
    def build(params: QueryParams) -> None:
        q = _require_pairs(req.pairs)
        if req.date is None:
            raise ValidationError("`date` is required")
        params.append(("q", q))
        if compact:
            params.append(("compact", "ultra"))
        params.append(("date", format_date(req.date)))
        if req.end_date is not None:
            params.append(("endDate", format_date(req.end_date)))

    return build


def convert(req: models.ConvertRequest) -> Endpoint:
    return Endpoint("convert", True, models.Convert, _convert_query(req, compact=False))


def convert_compact(req: models.ConvertRequest) -> Endpoint:
    return Endpoint("convert", True, models.ConvertCompact, _convert_query(req, compact=True))


def convert_historical(req: models.ConvertHistoricalRequest) -> Endpoint:
    return Endpoint("convert", True, models.ConvertHistorical, _historical_query(req, compact=False))


def convert_historical_compact(req: models.ConvertHistoricalRequest) -> Endpoint:
    return Endpoint(
        "convert", True, models.ConvertHistoricalCompact, _historical_query(req, compact=True)
    )


def currencies() -> Endpoint:
    return Endpoint("currencies", True, models.Currency)


def countries() -> Endpoint:
    return Endpoint("countries", True, models.Country)


def usage() -> Endpoint:
    # The usage endpoint lives outside the versioned /api tree.
    return Endpoint("others/usage", False, models.Usage)
