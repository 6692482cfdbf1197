import os
from dataclasses import dataclass

from borderwait.jobs.ingest.config import FetchConfig, load_fetch_config
from borderwait.jobs.ingest.utils.port_id import DEFAULT_PORT_PREFIX

from .normalize import DEFAULT_REGION_PREFIX


@dataclass(frozen=True)
class CbpConfig:
    url: str
    details_url: str

    restrict_to_region: bool
    region_prefix: str
    default_port_prefix: str

    fetch: FetchConfig


def load_config() -> CbpConfig:
    return CbpConfig(
        url=os.getenv("CBP_BWT_URL", "https://bwt.cbp.gov/api/bwtnew"),
        details_url=os.getenv("CBP_DETAILS_URL", "https://bwt.cbp.gov/details/{port_id}/{lane_type}"),
        restrict_to_region=os.getenv("CBP_RESTRICT_TO_REGION", "1") == "1",
        region_prefix=os.getenv("CBP_REGION_PREFIX", DEFAULT_REGION_PREFIX),
        default_port_prefix=os.getenv("BWT_DEFAULT_PORT_PREFIX", DEFAULT_PORT_PREFIX),
        fetch=load_fetch_config(),
    )
