from __future__ import annotations

import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException, Query

from borderwait.api.v1.schemas.crossings import CanadaCrossing, UsCrossing
from borderwait.core.deps import get_cbp_source, get_cbsa_source, get_http_client
from borderwait.jobs.ingest.errors import BorderWaitError
from borderwait.jobs.ingest.sources.cbp.source import CbpSource
from borderwait.jobs.ingest.sources.cbsa.source import CbsaSource

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/crossings", tags=["crossings"])


def _upstream_failure(source: str, e: Exception) -> HTTPException:
    logger.error("%s upstream failed: %r", source, e)
    return HTTPException(status_code=502, detail=f"{source} wait times unavailable: {e}")


@router.get("/canada", response_model=list[CanadaCrossing])
def get_canada_crossings(
    client: httpx.Client = Depends(get_http_client),
    source: CbsaSource = Depends(get_cbsa_source),
):
    try:
        records = source.fetch(client)
    except (httpx.HTTPError, BorderWaitError) as e:
        raise _upstream_failure("CBSA", e)

    return [CanadaCrossing.from_record(r) for r in records]


@router.get("/us", response_model=list[UsCrossing])
def get_us_crossings(
    all_regions: bool = Query(False, description="Include ports outside the configured region"),
    client: httpx.Client = Depends(get_http_client),
    source: CbpSource = Depends(get_cbp_source),
):
    if all_regions:
        source = CbpSource(source.cfg, restrict_to_region=False)

    try:
        records = source.fetch(client)
    except (httpx.HTTPError, BorderWaitError) as e:
        raise _upstream_failure("CBP", e)

    return [UsCrossing.from_record(r) for r in records]
