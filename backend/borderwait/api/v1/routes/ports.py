from fastapi import APIRouter, Depends, HTTPException, Query

from borderwait.api.v1.schemas.ports import PortIdentifier
from borderwait.core.deps import get_cbp_source
from borderwait.jobs.ingest.errors import FormatError
from borderwait.jobs.ingest.sources.cbp.source import LANE_TYPES, CbpSource
from borderwait.jobs.ingest.utils.port_id import encode_id, string_to_parts

router = APIRouter(prefix="/v1/ports", tags=["ports"])


@router.get("/{port_id}", response_model=PortIdentifier)
def get_port_identifier(
    port_id: str,
    assume_prefix: bool = Query(False, description="Prepend the default prefix to 6-digit ids"),
    lane_type: str = Query("POV", pattern="^(" + "|".join(LANE_TYPES) + ")$"),
    source: CbpSource = Depends(get_cbp_source),
):
    try:
        parts = string_to_parts(port_id, assume_prefix, default_prefix=source.cfg.default_port_prefix)
    except FormatError as e:
        raise HTTPException(status_code=422, detail=str(e))

    full_id = encode_id(parts)
    return PortIdentifier(
        prefix=parts.prefix,
        port_of_entry=parts.port_of_entry,
        suffix=parts.suffix,
        port_id=full_id,
        value=parts.value,
        details_url=source.details_url(full_id, lane_type),
    )
