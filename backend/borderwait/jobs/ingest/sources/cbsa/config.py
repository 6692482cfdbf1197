import os
from dataclasses import dataclass

from borderwait.jobs.ingest.config import FetchConfig, load_fetch_config

from .table import CBSA_TABLE_ID


@dataclass(frozen=True)
class CbsaConfig:
    url: str
    table_id: str
    fetch: FetchConfig


def load_config() -> CbsaConfig:
    return CbsaConfig(
        url=os.getenv("CBSA_BWT_URL", "https://www.cbsa-asfc.gc.ca/bwt-taf/menu-eng.html"),
        table_id=os.getenv("CBSA_TABLE_ID", CBSA_TABLE_ID),
        fetch=load_fetch_config(),
    )
