"""Nearby mosque lookup that fans out over several Places search strategies."""

import logging
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Any, Dict, List, Optional

from mosque_proxy.etl.merge import merge_place_results
from mosque_proxy.models import NearbyQuery
from mosque_proxy.vendors import google_places

logger = logging.getLogger(__name__)

_executor = ThreadPoolExecutor(max_workers=6)

MOSQUE_TYPE = "mosque"
MOSQUE_KEYWORDS = "masjid,mosque,islamic,muslim,prayer"
MOSQUE_TEXT_QUERY = "mosque masjid islamic center"


def build_nearby_queries() -> List[NearbyQuery]:
    return [
        NearbyQuery(name="type", endpoint="nearbysearch", params={"place_type": MOSQUE_TYPE}),
        NearbyQuery(name="keyword", endpoint="nearbysearch", params={"keyword": MOSQUE_KEYWORDS}),
        NearbyQuery(name="text", endpoint="textsearch", params={"query": MOSQUE_TEXT_QUERY}),
    ]


def _run_query(query: NearbyQuery, lat: str, lng: str, radius: Any, api_key: str) -> Dict[str, Any]:
    if query.endpoint == "textsearch":
        return google_places.text_search(query.params["query"], api_key, lat=lat, lng=lng, radius=radius)
    return google_places.nearby_search(lat, lng, radius, api_key, **query.params)


def search_nearby(
    *,
    lat: str,
    lng: str,
    radius: Any,
    api_key: str,
    executor: Optional[Executor] = None,
) -> Dict[str, Any]:
    """Run every strategy concurrently and return the merged envelope.

    Futures are resolved in submission order, so the first strategy wins ties
    and any failing call raises before a partial merge is built.
    """
    pool = executor or _executor
    queries = build_nearby_queries()
    logger.info("Running %d nearby searches at %s,%s radius=%s", len(queries), lat, lng, radius)

    futures = [pool.submit(_run_query, query, lat, lng, radius, api_key) for query in queries]
    payloads = [future.result() for future in futures]

    for query, payload in zip(queries, payloads):
        logger.debug("Strategy %s returned status=%s with %d results",
                     query.name, payload.get("status"), len(payload.get("results") or []))

    results = merge_place_results(payloads)
    logger.info("Merged %d unique places", len(results))
    return {"status": "OK", "results": results}
