import logging
from typing import Optional, Union

import httpx

from borderwait.jobs.ingest.http import get_with_retry
from borderwait.jobs.ingest.sources.base import BaseSource
from borderwait.jobs.ingest.types import BorderCrossing
from borderwait.jobs.ingest.utils.port_id import decode_id, encode_id

from .config import CbpConfig, load_config
from .normalize import normalize, select_by_region

logger = logging.getLogger(__name__)

LANE_TYPES = ("POV", "COV", "PED")


class CbpSource(BaseSource):
    """
    CBP border wait times, US side:
      - GET the JSON feed of all ports
      - normalize, then keep the configured region unless told otherwise
    """

    name = "cbp"

    def __init__(self, cfg: Optional[CbpConfig] = None, *, restrict_to_region: Optional[bool] = None):
        self.cfg = cfg or load_config()
        self.restrict_to_region = (
            self.cfg.restrict_to_region if restrict_to_region is None else restrict_to_region
        )
        logger.debug(
            "CBP configured url=%s restrict_to_region=%s region_prefix=%s",
            self.cfg.url,
            self.restrict_to_region,
            self.cfg.region_prefix,
        )

    def parse(self, payload: str) -> list[BorderCrossing]:
        records = normalize(payload)
        undated = [r.port_number for r in records if r.date is None]
        if undated:
            logger.warning("CBP ports without a usable date/time: %s", ", ".join(map(str, undated)))
        selected = list(select_by_region(records, self.restrict_to_region, self.cfg.region_prefix))
        if self.restrict_to_region:
            logger.info(
                "CBP region %s kept %d of %d ports",
                self.cfg.region_prefix,
                len(selected),
                len(records),
            )
        return selected

    def fetch(self, client: httpx.Client) -> list[BorderCrossing]:
        logger.info("Fetching CBP wait times from %s", self.cfg.url)
        body = get_with_retry(self.cfg.fetch, client, self.cfg.url)
        records = self.parse(body)
        logger.info("CBP produced %d ports", len(records))
        return records

    def details_url(self, port_id: Union[str, int], lane_type: str = "POV") -> str:
        """Public details page of one crossing; 6-digit port numbers get the default prefix."""
        if lane_type not in LANE_TYPES:
            raise ValueError(f"lane_type must be one of {', '.join(LANE_TYPES)}")
        parts = decode_id(port_id, assume_prefix_if_short=True, default_prefix=self.cfg.default_port_prefix)
        return self.cfg.details_url.format(port_id=encode_id(parts), lane_type=lane_type)
