import argparse
import logging
from pathlib import Path

from borderwait.api.v1.schemas.crossings import CanadaCrossing, UsCrossing
from borderwait.jobs.ingest.config import load_fetch_config
from borderwait.jobs.ingest.http import configure_logging_if_needed, make_client
from borderwait.jobs.ingest.registry import SOURCES
from borderwait.jobs.ingest.sources.cbp.source import CbpSource

logger = logging.getLogger(__name__)

SCHEMAS = {
    "cbsa": CanadaCrossing,
    "cbp": UsCrossing,
}


def main(argv=None):
    p = argparse.ArgumentParser(description="Fetch border wait times and print them as JSON lines")
    p.add_argument("--source", required=True, choices=SOURCES.keys())
    p.add_argument("--all-regions", action="store_true", help="CBP only: keep ports outside the configured region")
    p.add_argument("--input", type=Path, help="Parse a saved page/feed instead of fetching it")

    args = p.parse_args(argv)
    configure_logging_if_needed()

    if args.source == CbpSource.name and args.all_regions:
        source = CbpSource(restrict_to_region=False)
    else:
        source = SOURCES[args.source]()  # instantiate adapter

    if args.input:
        logger.info("Parsing %s from %s", args.source, args.input)
        records = source.parse(args.input.read_text(encoding="utf-8"))
    else:
        with make_client(load_fetch_config()) as client:
            records = source.fetch(client)

    schema = SCHEMAS[args.source]
    for rec in records:
        print(schema.from_record(rec).model_dump_json())

    logger.info("%s done: %d records", args.source, len(records))
    return records


if __name__ == "__main__":
    main()
