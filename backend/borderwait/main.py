from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from borderwait.api.v1.routes.crossings import router as crossings_router
from borderwait.api.v1.routes.health import router as health_router
from borderwait.api.v1.routes.ports import router as ports_router
from borderwait.jobs.ingest.http import configure_logging_if_needed

configure_logging_if_needed()

app = FastAPI(title="Border Wait Times API")

# Read-only public data: allow all origins/methods/headers so a map frontend can call the API directly.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router, prefix="/v1")
app.include_router(crossings_router)
app.include_router(ports_router)
