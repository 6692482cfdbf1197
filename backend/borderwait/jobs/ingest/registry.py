from borderwait.jobs.ingest.sources.cbp.source import CbpSource
from borderwait.jobs.ingest.sources.cbsa.source import CbsaSource

SOURCES = {
    CbsaSource.name: CbsaSource,
    CbpSource.name: CbpSource,
}
