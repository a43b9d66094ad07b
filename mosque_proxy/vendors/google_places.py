"""Client utilities for the Google Places API."""

import logging
from typing import Any, Dict, Optional

import requests

from mosque_proxy.core.errors import UpstreamError

logger = logging.getLogger(__name__)
_SESSION = requests.Session()
_BASE_URL = "https://maps.googleapis.com/maps/api/place"
_TIMEOUT = 10


def _location(lat: str, lng: str) -> str:
    return f"{lat},{lng}"


def _describe_failure(exc: requests.RequestException, path: str) -> str:
    """Summarize a transport failure without the request URL."""
    response = getattr(exc, "response", None)
    if isinstance(exc, requests.HTTPError) and response is not None:
        return f"Request failed with status code {response.status_code}"
    return f"{type(exc).__name__} while calling {path}"


def _get_json(path: str, params: Dict[str, Any]) -> Dict[str, Any]:
    url = f"{_BASE_URL}/{path}"
    logger.debug("GET %s params=%s", url, {k: v for k, v in params.items() if k != "key"})
    try:
        response = _SESSION.get(url, params=params, timeout=_TIMEOUT)
        response.raise_for_status()
        payload = response.json()
    except requests.RequestException as exc:
        raise UpstreamError(_describe_failure(exc, path)) from None
    except ValueError as exc:
        raise UpstreamError(f"invalid JSON from {path}: {exc}") from None
    if not isinstance(payload, dict):
        raise UpstreamError(f"unexpected {type(payload).__name__} payload from {path}")
    status = payload.get("status")
    if status not in {"OK", "ZERO_RESULTS"}:
        logger.warning("%s returned status=%s, error_message=%s", path, status, payload.get("error_message"))
    return payload


def nearby_search(
    lat: str,
    lng: str,
    radius: Any,
    api_key: str,
    *,
    place_type: Optional[str] = None,
    keyword: Optional[str] = None,
) -> Dict[str, Any]:
    params: Dict[str, Any] = {"location": _location(lat, lng), "radius": radius, "key": api_key}
    if place_type:
        params["type"] = place_type
    if keyword:
        params["keyword"] = keyword
    return _get_json("nearbysearch/json", params)


def text_search(
    query: str,
    api_key: str,
    *,
    lat: Optional[str] = None,
    lng: Optional[str] = None,
    radius: Any = None,
) -> Dict[str, Any]:
    params: Dict[str, Any] = {"query": query, "key": api_key}
    if lat is not None and lng is not None:
        params["location"] = _location(lat, lng)
    if radius is not None:
        params["radius"] = radius
    return _get_json("textsearch/json", params)


def place_details(place_id: str, api_key: str) -> Dict[str, Any]:
    """Return the raw details payload, upstream status included."""
    return _get_json("details/json", {"place_id": place_id, "key": api_key})


def place_photo(photo_reference: str, api_key: str, max_width: Any) -> requests.Response:
    """Open a streamed photo response; the caller must close it.

    The Places photo endpoint answers with a redirect to the image host, which
    ``requests`` follows before the body is read.
    """
    params = {"maxwidth": max_width, "photoreference": photo_reference, "key": api_key}
    try:
        response = _SESSION.get(f"{_BASE_URL}/photo", params=params, timeout=_TIMEOUT, stream=True)
    except requests.RequestException as exc:
        raise UpstreamError(_describe_failure(exc, "photo")) from None
    try:
        response.raise_for_status()
    except requests.RequestException as exc:
        response.close()
        raise UpstreamError(_describe_failure(exc, "photo")) from None
    return response
