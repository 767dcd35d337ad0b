"""
Client for the feed endpoint of NASA's Near Earth Object Web Service (NeoWs).

The feed groups near earth objects by close approach date. This module fetches
it for a date range and reduces each object to its name and hazard flag.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

import requests

from config import ProxyConfig

# failure kinds
TRANSPORT_FAILURE = "transport"
SHAPE_FAILURE = "shape"

FeedResult = Dict[str, List[Dict[str, Any]]]


@dataclass
class UpstreamRejection:
    """NeoWs answered with a non-2xx status; body is kept as raw text."""

    status_code: int
    body: str


@dataclass
class FeedFailure:
    """The feed could not be fetched (transport) or walked (shape)."""

    kind: str
    message: str
    exc: Optional[BaseException] = None


FeedOutcome = Union[FeedResult, UpstreamRejection, FeedFailure]


def build_feed_url(start_date: str, end_date: str, config: ProxyConfig) -> str:
    """interpolate dates and api key into the feed url, verbatim (no encoding)"""
    return config.feed_url_template.format(start=start_date, end=end_date, api_key=config.api_key or "")


def _summarise_asteroid(obj: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "name": obj.get("name"),
        "hazardous": obj.get("is_potentially_hazardous_asteroid"),
    }


def summarise_feed(response_json: Dict[str, Any]) -> FeedResult:
    """map the feed to {date: [{name, hazardous}, ...]} keeping upstream order."""
    # structure: {"near_earth_objects": { "YYYY-MM-DD": [obj, ...], ... }}
    neo_data = response_json.get("near_earth_objects") or {}
    result: FeedResult = {}
    for date, objects_on_date in neo_data.items():
        result[date] = [_summarise_asteroid(obj) for obj in objects_on_date]
    return result


def fetch_asteroid_feed(start_date: str, end_date: str, config: ProxyConfig) -> FeedOutcome:
    """Fetch the NeoWs feed for a date range and summarise it.

    Returns the FeedResult on success, an UpstreamRejection when NeoWs answers
    outside 2xx, or a FeedFailure when the request or the payload breaks.
    Nothing is retried.
    """
    url = build_feed_url(start_date, end_date, config)
    try:
        r = requests.get(url, timeout=config.request_timeout)
    except requests.RequestException as exc:
        return FeedFailure(TRANSPORT_FAILURE, str(exc), exc)

    if not 200 <= r.status_code < 300:
        return UpstreamRejection(r.status_code, r.text)

    try:
        return summarise_feed(r.json())
    except (ValueError, TypeError, AttributeError) as exc:
        # ValueError covers invalid json bodies
        return FeedFailure(SHAPE_FAILURE, str(exc), exc)


def log_feed(result: FeedResult, logger: logging.Logger) -> None:
    """write one header per date and one line per asteroid to the log."""
    for date, asteroids in result.items():
        logger.info("Date: %s", date)
        for a in asteroids:
            logger.info("- Name: %s, Hazardous: %s", a["name"], a["hazardous"])
