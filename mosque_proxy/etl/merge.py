"""Utilities for merging Google Places result sets."""

import logging
from typing import Any, Dict, Iterable, List

logger = logging.getLogger(__name__)


def merge_place_results(payloads: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Union the ``results`` of each OK payload, keeping the first place per ``place_id``.

    Payloads are consumed in the order given; places keep their response order.
    """
    places: List[Dict[str, Any]] = []
    seen = set()
    for payload in payloads:
        if payload.get("status") != "OK" or not payload.get("results"):
            logger.debug("Skipping payload with status=%s", payload.get("status"))
            continue
        for place in payload["results"]:
            place_id = place.get("place_id")
            if place_id in seen:
                continue
            seen.add(place_id)
            places.append(place)
    return places
