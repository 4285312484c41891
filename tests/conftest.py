import os

import pytest

from currconv import APIClient, AsyncAPIClient, Config

BASE_URL = "http://currconv.test"


@pytest.fixture(scope="session", autouse=True)
def _env_setup():
    # Keep a developer's .env / shell from leaking into settings-based tests
    os.environ["CURRCONV_BASE_URL"] = BASE_URL
    os.environ["CURRCONV_API_VERSION"] = "v1"
    os.environ["CURRCONV_API_KEY"] = "env-key"
    os.environ.pop("HTTP_TIMEOUT_SEC", None)


@pytest.fixture()
def config():
    return Config(base_url=BASE_URL, version="v1", api_key="key")


@pytest.fixture()
def api(config):
    return APIClient(config)


@pytest.fixture()
def async_api(config):
    return AsyncAPIClient(config)
