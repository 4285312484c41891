from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date as Date, datetime
from typing import Dict, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, StrictFloat

# ---------- requests ----------

@dataclass(frozen=True)
class ConvertRequest:
    # "FROM_TO" codes, e.g. "USD_MYR". Several pairs are answered in one call.
    pairs: Sequence[str] = field(default_factory=tuple)


@dataclass(frozen=True)
class ConvertHistoricalRequest:
    pairs: Sequence[str] = field(default_factory=tuple)
    date: Optional[Date] = None
    # Together with `date` forms an inclusive date range.
    end_date: Optional[Date] = None


# ---------- results ----------

# Rates must be JSON numbers; numeric strings are rejected.
Rate = StrictFloat

class _Wire(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class QueryInfo(_Wire):
    count: int = 0


class Conversion(_Wire):
    id: str
    val: Rate
    to: str
    fr: str


class Convert(_Wire):
    query: QueryInfo = Field(default_factory=QueryInfo)
    results: Dict[str, Conversion] = Field(default_factory=dict)


class HistoricalConversion(_Wire):
    id: str
    to: str
    fr: str
    # date string (YYYY-MM-DD) -> rate
    val: Dict[str, Rate] = Field(default_factory=dict)


class ConvertHistorical(_Wire):
    query: QueryInfo = Field(default_factory=QueryInfo)
    date: str = ""
    end_date: Optional[str] = Field(default=None, alias="endDate")
    results: Dict[str, HistoricalConversion] = Field(default_factory=dict)


# Compact mode drops the envelope: pair -> rate, or pair -> date -> rate.
ConvertCompact = Dict[str, Rate]
ConvertHistoricalCompact = Dict[str, Dict[str, Rate]]


class CurrencyInfo(_Wire):
    id: str
    currency_name: str = Field(alias="currencyName")
    currency_symbol: Optional[str] = Field(default=None, alias="currencySymbol")


class Currency(_Wire):
    results: Dict[str, CurrencyInfo] = Field(default_factory=dict)


class CountryInfo(_Wire):
    id: str
    name: str
    alpha3: str
    currency_id: str = Field(alias="currencyId")
    currency_name: str = Field(alias="currencyName")
    currency_symbol: Optional[str] = Field(default=None, alias="currencySymbol")


class Country(_Wire):
    results: Dict[str, CountryInfo] = Field(default_factory=dict)


class Usage(_Wire):
    timestamp: datetime
    usage: int


# ---------- errors ----------

class ErrorPayload(BaseModel):
    # Missing status falls back to the HTTP status, missing error to "".
    status: Optional[int] = None
    error: str = ""
