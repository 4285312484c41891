"""
Currency converter API clients.

Every public method is a thin configuration of one executor: build the URL,
let the endpoint add (and validate) its query parameters, append the API key,
send a single GET and decode either the result shape or the error envelope.

No retries and no caching. One request per call; the HTTP client and the
response are closed before the call returns.
"""
from __future__ import annotations

import logging
import urllib.parse
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Optional

import httpx
import pydantic
from pydantic import TypeAdapter

from . import endpoints, models
from .endpoints import Endpoint, QueryParams
from ._version import __version__
from .errors import DecodeError, InvalidConfiguration, RemoteError, TransportError
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

USER_AGENT = f"currconv-python/{__version__}"


@dataclass(frozen=True)
class Config:
    base_url: str
    version: str
    api_key: str
    # None keeps httpx's default timeout
    timeout: Optional[float] = None

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Config":
        s = settings or get_settings()
        return cls(
            base_url=s.CURRCONV_BASE_URL,
            version=s.CURRCONV_API_VERSION,
            api_key=s.CURRCONV_API_KEY,
            timeout=s.HTTP_TIMEOUT_SEC,
        )


def _join_path(base: str, segments) -> str:
    # Segments come from config, so "?" and "#" are escaped rather than ending the path.
    parts = [base.rstrip("/")]
    parts.extend(
        urllib.parse.quote(s.strip("/"), safe="/") for s in segments if s and s.strip("/")
    )
    return "/".join(parts)


@lru_cache(maxsize=None)
def _adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


class _BaseClient:
    def __init__(self, config: Config, transport: Optional[Any] = None):
        self.config = config
        self._transport = transport

    @classmethod
    def from_env(cls, settings: Optional[Settings] = None, **kwargs):
        return cls(Config.from_settings(settings), **kwargs)

    def _client_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {"headers": {"User-Agent": USER_AGENT}}
        if self.config.timeout is not None:
            kwargs["timeout"] = self.config.timeout
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return kwargs

    def _build_url(self, endpoint: Endpoint) -> httpx.URL:
        """Resolve the full request URL, query included. Raises before any I/O."""
        segments = ["api", self.config.version] if endpoint.api_prefixed else []
        segments.append(endpoint.path)
        try:
            url = httpx.URL(self.config.base_url)
            url = url.copy_with(path=_join_path(url.path, segments))
        except httpx.InvalidURL as e:
            raise InvalidConfiguration(
                f"cannot build request URL from base URL {self.config.base_url!r}: {e}"
            ) from e

        params: QueryParams = []
        endpoint.build_query(params)
        params.append(("apiKey", self.config.api_key))
        return url.copy_merge_params(params)

    def _handle(self, endpoint: Endpoint, response: httpx.Response) -> Any:
        if response.status_code != httpx.codes.OK:
            err = _remote_error(response)
            logger.warning(f"{endpoint.path} failed with HTTP {response.status_code}: {err.message}")
            raise err
        try:
            return _adapter(endpoint.shape).validate_json(response.content)
        except pydantic.ValidationError as e:
            raise DecodeError(
                f"unexpected {endpoint.path} response: {e.errors()[0].get('msg', 'invalid')}",
                body=response.text,
            ) from e


def _remote_error(response: httpx.Response) -> RemoteError:
    """
    Build the error for a non-200 response.

    A JSON object is read as the {status, error} envelope, missing fields and
    all (`{"status": 404}` gives an empty message). Any other body, such as
    plain text, becomes the message verbatim.
    """
    try:
        payload = models.ErrorPayload.model_validate_json(response.content)
    except pydantic.ValidationError:
        return RemoteError(response.status_code, response.text)
    status = payload.status if payload.status is not None else response.status_code
    return RemoteError(status, payload.error)


class APIClient(_BaseClient):
    """Blocking client. Safe to share across threads; configuration is read-only."""

    def _call(self, endpoint: Endpoint) -> Any:
        url = self._build_url(endpoint)
        logger.debug(f"GET {url.path}")
        try:
            with httpx.Client(**self._client_kwargs()) as client:
                response = client.get(url)
        except httpx.RequestError as e:
            raise TransportError(e) from e
        return self._handle(endpoint, response)

    def convert(self, req: models.ConvertRequest) -> models.Convert:
        """Conversion rates for one or more "FROM_TO" pairs."""
        return self._call(endpoints.convert(req))

    def convert_compact(self, req: models.ConvertRequest) -> models.ConvertCompact:
        return self._call(endpoints.convert_compact(req))

    def convert_historical(self, req: models.ConvertHistoricalRequest) -> models.ConvertHistorical:
        """Rates on `req.date`, or for every day from `req.date` to `req.end_date`."""
        return self._call(endpoints.convert_historical(req))

    def convert_historical_compact(
        self, req: models.ConvertHistoricalRequest
    ) -> models.ConvertHistoricalCompact:
        return self._call(endpoints.convert_historical_compact(req))

    def currencies(self) -> models.Currency:
        return self._call(endpoints.currencies())

    def countries(self) -> models.Country:
        return self._call(endpoints.countries())

    def usage(self) -> models.Usage:
        """Current API usage for the configured key."""
        return self._call(endpoints.usage())


class AsyncAPIClient(_BaseClient):
    """Same surface as `APIClient`, awaited on httpx.AsyncClient."""

    async def _call(self, endpoint: Endpoint) -> Any:
        url = self._build_url(endpoint)
        logger.debug(f"GET {url.path}")
        try:
            async with httpx.AsyncClient(**self._client_kwargs()) as client:
                response = await client.get(url)
        except httpx.RequestError as e:
            raise TransportError(e) from e
        return self._handle(endpoint, response)

    async def convert(self, req: models.ConvertRequest) -> models.Convert:
        return await self._call(endpoints.convert(req))

    async def convert_compact(self, req: models.ConvertRequest) -> models.ConvertCompact:
        return await self._call(endpoints.convert_compact(req))

    async def convert_historical(self, req: models.ConvertHistoricalRequest) -> models.ConvertHistorical:
        return await self._call(endpoints.convert_historical(req))

    async def convert_historical_compact(
        self, req: models.ConvertHistoricalRequest
    ) -> models.ConvertHistoricalCompact:
        return await self._call(endpoints.convert_historical_compact(req))

    async def currencies(self) -> models.Currency:
        return await self._call(endpoints.currencies())

    async def countries(self) -> models.Country:
        return await self._call(endpoints.countries())

    async def usage(self) -> models.Usage:
        return await self._call(endpoints.usage())
