"""Shared fixtures: a saved CBSA page, a CBP feed excerpt, fast fetch settings."""

import json

import pytest

from borderwait.jobs.ingest import http
from borderwait.jobs.ingest.config import FetchConfig
from borderwait.jobs.ingest.sources.cbp.config import CbpConfig
from borderwait.jobs.ingest.sources.cbsa.config import CbsaConfig

CBSA_HTML = """<!DOCTYPE html>
<html lang="en">
<head><title>Border wait times</title></head>
<body>
<main>
<table id="bwttaf" class="table">
  <caption>Canada-bound wait times</caption>
  <thead>
    <tr>
      <th scope="col">CBSA Office</th>
      <th scope="col">Commercial Flow</th>
      <th scope="col">Travellers Flow</th>
      <th scope="col">Updated</th>
    </tr>
  </thead>
  <tbody>
    <tr>
      <th scope="row"><b>Abbotsford-Huntingdon</b><br><span>Abbotsford, BC / Sumas, WA</span></th>
      <td>No Delay</td>
      <td>10 minutes</td>
      <td><time datetime="2022-06-29T14:30:00">2022-06-29 14:30 PDT</time></td>
    </tr>
    <tr>
      <th scope="row"><b>Ambassador Bridge</b><br><span>Windsor, ON / Detroit, MI</span></th>
      <td>No Delay</td>
      <td>5 minutes</td>
      <td><time datetime="2022-06-29T17:30:00">2022-06-29 17:30 EDT</time></td>
    </tr>
    <tr>
      <th scope="row"><b>Pacific Highway</b><br><span>Surrey, BC / Blaine, WA</span></th>
      <td>1 hour</td>
      <td>Not Applicable</td>
      <td><time datetime="2022-06-29T21:35:00+00:00">2022-06-29 2:35 pm pdt</time></td>
    </tr>
    <tr>
      <th scope="row"><b>Boundary Bay</b><br><span>Delta, BC / Point Roberts, WA</span></th>
      <td>Not Applicable</td>
      <td>No Delay</td>
      <td>Temporarily closed</td>
    </tr>
    <tr>
      <th scope="row"><b>Aldergrove</b><br><span>Aldergrove, BC / Lynden, WA</span></th>
      <td>Not Applicable</td>
      <td>Closed</td>
      <td><time datetime="2022-01-10T08:00:00">2022-01-10 08:00 PST</time></td>
    </tr>
    <tr>
      <th scope="row"><b>Douglas</b></th>
      <td>No Delay</td>
      <td>No Delay</td>
      <td><time datetime="not a date">2022-06-29 14:30 PDT</time></td>
    </tr>
  </tbody>
</table>
</main>
</body>
</html>
"""


def lanes(status="no delay", update_time="At 2:00 pm PDT", delay="0", open_="2"):
    return {
        "operational_status": status,
        "update_time": update_time,
        "delay_minutes": delay,
        "lanes_open": open_,
    }


CBP_FEED = [
    {
        "port_number": "300401",
        "border": "Canadian Border",
        "port_name": "Blaine",
        "crossing_name": "Peace Arch",
        "hours": "24 hrs/day",
        "date": "6/29/2022",
        "time": "14:30:00",
        "port_status": "Open",
        "construction_notice": "",
        "automation": "1",
        "automation_enabled": "0",
        "commercial_vehicle_lanes": {
            "maximum_lanes": "N/A",
            "standard_lanes": lanes(status="N/A", update_time="", delay="", open_=""),
            "FAST_lanes": lanes(status="N/A", update_time="", delay="", open_=""),
        },
        "passenger_vehicle_lanes": {
            "maximum_lanes": "8",
            "standard_lanes": lanes(delay="15", open_="4"),
            "NEXUS_SENTRI_lanes": lanes(delay="5", open_="1"),
            "ready_lanes": lanes(delay="10", open_="2"),
        },
        "pedestrian_lanes": {
            "maximum_lanes": "2",
            "standard_lanes": lanes(delay="0", open_="1"),
            "ready_lanes": lanes(status="Lanes Closed", update_time="", delay="", open_=""),
        },
    },
    {
        "port_number": "070801",
        "border": "Canadian Border",
        "port_name": "Buffalo-Niagara Falls",
        "crossing_name": "Peace Bridge",
        "hours": "24 hrs/day",
        "date": "6/29/2022",
        "time": "17:00:00",
        "port_status": "Open",
        "construction_notice": "Lane closures expected",
        "automation": "0",
        "automation_enabled": "1",
        "commercial_vehicle_lanes": {
            "maximum_lanes": "5",
            "standard_lanes": lanes(delay="20", open_="3"),
        },
        "passenger_vehicle_lanes": {
            "maximum_lanes": "10",
            "standard_lanes": lanes(delay="30", open_="6"),
        },
        "pedestrian_lanes": {
            "maximum_lanes": "N/A",
            "standard_lanes": lanes(status="N/A", update_time="", delay="", open_=""),
        },
    },
    {
        "port_number": "300901",
        "border": "Canadian Border",
        "port_name": "Sumas",
        "crossing_name": "",
        "hours": "24 hrs/day",
        "date": "6/29/2022",
        "time": "14:00:00",
        "port_status": "Open",
        "construction_notice": "",
        "automation": "",
        "automation_enabled": "",
        "commercial_vehicle_lanes": {
            "maximum_lanes": "2",
            "standard_lanes": lanes(delay="5", open_="1"),
        },
        "passenger_vehicle_lanes": {
            "maximum_lanes": "4",
            "standard_lanes": lanes(delay="25", open_="2"),
        },
        "pedestrian_lanes": {
            "maximum_lanes": "N/A",
            "standard_lanes": lanes(status="N/A", update_time="", delay="", open_=""),
        },
    },
]


@pytest.fixture
def cbsa_html() -> str:
    return CBSA_HTML


@pytest.fixture
def cbp_feed() -> list[dict]:
    return json.loads(json.dumps(CBP_FEED))


@pytest.fixture
def cbp_json(cbp_feed) -> str:
    return json.dumps(cbp_feed)


@pytest.fixture
def fetch_config() -> FetchConfig:
    return FetchConfig(
        connect_timeout=1.0,
        read_timeout=1.0,
        write_timeout=1.0,
        pool_timeout=1.0,
        retries=3,
        backoff_base=0.0,
        user_agent="borderwait-tests",
    )


@pytest.fixture
def cbsa_config(fetch_config) -> CbsaConfig:
    return CbsaConfig(url="https://cbsa.test/bwt", table_id="bwttaf", fetch=fetch_config)


@pytest.fixture
def cbp_config(fetch_config) -> CbpConfig:
    return CbpConfig(
        url="https://cbp.test/api/bwtnew",
        details_url="https://cbp.test/details/{port_id}/{lane_type}",
        restrict_to_region=True,
        region_prefix="30",
        default_port_prefix="02",
        fetch=fetch_config,
    )


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    monkeypatch.setattr(http.time, "sleep", lambda s: None)
