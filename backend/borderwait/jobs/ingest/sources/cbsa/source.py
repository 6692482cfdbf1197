import logging
from typing import Optional

import httpx

from borderwait.jobs.ingest.http import get_with_retry
from borderwait.jobs.ingest.sources.base import BaseSource
from borderwait.jobs.ingest.types import CanadaBorderCrossingTimes
from borderwait.jobs.ingest.utils.flow import is_flow_value

from .config import CbsaConfig, load_config
from .table import TableParser, default_table_parser

logger = logging.getLogger(__name__)


class CbsaSource(BaseSource):
    """
    CBSA border wait times, Canadian side:
      - GET the published HTML page
      - extract the wait time table, Pacific-zone offices only
    """

    name = "cbsa"

    def __init__(self, cfg: Optional[CbsaConfig] = None, parser: Optional[TableParser] = None):
        self.cfg = cfg or load_config()
        self.parser = parser or default_table_parser(self.cfg.table_id)
        logger.debug(
            "CBSA configured url=%s table_id=%s parser=%s",
            self.cfg.url,
            self.cfg.table_id,
            type(self.parser).__name__,
        )

    def parse(self, payload: str) -> list[CanadaBorderCrossingTimes]:
        records = self.parser.extract(payload)

        for rec in records:
            for label, flow in (("commercial", rec.commercial_flow), ("travellers", rec.travellers_flow)):
                if not is_flow_value(flow):
                    logger.warning("CBSA office %r has unexpected %s flow %r", rec.cbsa_office, label, flow)
        return records

    def fetch(self, client: httpx.Client) -> list[CanadaBorderCrossingTimes]:
        logger.info("Fetching CBSA wait times from %s", self.cfg.url)
        html = get_with_retry(self.cfg.fetch, client, self.cfg.url)
        records = self.parse(html)
        logger.info("CBSA produced %d Pacific-zone offices", len(records))
        return records
