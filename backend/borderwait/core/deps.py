from typing import Iterator

import httpx

from borderwait.jobs.ingest.config import load_fetch_config
from borderwait.jobs.ingest.http import make_client
from borderwait.jobs.ingest.sources.cbp.source import CbpSource
from borderwait.jobs.ingest.sources.cbsa.source import CbsaSource


def get_http_client() -> Iterator[httpx.Client]:
    with make_client(load_fetch_config()) as client:
        yield client


def get_cbsa_source() -> CbsaSource:
    return CbsaSource()


def get_cbp_source() -> CbpSource:
    return CbpSource()
