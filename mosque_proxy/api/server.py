"""HTTP entrypoint that proxies mosque lookups to the Google Places API."""

from __future__ import annotations

import logging
from typing import Any, Iterator, Tuple

import requests
from flask import Flask, Response, jsonify, request, stream_with_context
from flask_cors import CORS

from mosque_proxy.core.config import get_settings
from mosque_proxy.core.errors import UpstreamError, ValidationError
from mosque_proxy.jobs.nearby_search import search_nearby
from mosque_proxy.vendors import google_places

# ---------- Logging ----------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

# ---------- App ----------
app = Flask(__name__)
app.json.sort_keys = False
CORS(app, origins=list(get_settings().cors_origins))

_PHOTO_CHUNK_SIZE = 8192


# ---------- Helpers ----------


def _require_coordinates() -> Tuple[str, str]:
    lat = request.args.get("lat")
    lng = request.args.get("lng")
    if not lat or not lng:
        raise ValidationError("Missing required parameters. Please provide lat and lng.")
    return lat, lng


def _upstream_failure(message: str, exc: Exception) -> Any:
    return jsonify({"error": message, "details": str(exc)}), 500


@app.errorhandler(ValidationError)
def handle_validation_error(exc: ValidationError) -> Any:
    logger.warning("Rejected %s: %s", request.path, exc)
    return jsonify({"error": str(exc)}), 400


# ---------- Routes ----------


@app.get("/")
def root() -> Any:
    return "Atom's Masjid Finder API is running", 200


@app.get("/healthz")
def healthcheck() -> Any:
    """Lightweight health endpoint; never calls upstream."""
    settings = get_settings()
    return (
        jsonify(
            {
                "status": "ok",
                "port": settings.port,
                "api_key_configured": bool(settings.google_api_key),
            }
        ),
        200,
    )


@app.get("/api/mosques/nearby")
def nearby_mosques() -> Any:
    """
    Merge type, keyword and text searches around a coordinate.
    Required query params: lat, lng
    Optional: radius (meters)
    """
    lat, lng = _require_coordinates()
    settings = get_settings()
    radius = request.args.get("radius") or settings.default_radius

    try:
        envelope = search_nearby(lat=lat, lng=lng, radius=radius, api_key=settings.google_api_key)
    except UpstreamError as exc:
        logger.exception("Error fetching nearby mosques: %s", exc)
        return _upstream_failure("Failed to fetch nearby mosques", exc)

    return jsonify(envelope), 200


@app.get("/api/mosques/search")
def search_mosques() -> Any:
    lat, lng = _require_coordinates()
    settings = get_settings()
    query = request.args.get("query") or "mosque"
    radius = request.args.get("radius") or settings.default_radius

    try:
        payload = google_places.text_search(query, settings.google_api_key, lat=lat, lng=lng, radius=radius)
    except UpstreamError as exc:
        logger.exception("Error searching for mosques: %s", exc)
        return _upstream_failure("Failed to search for mosques", exc)

    return jsonify(payload), 200


@app.get("/api/mosques/", defaults={"place_id": ""})
@app.get("/api/mosques/<place_id>")
def mosque_details(place_id: str) -> Any:
    if not place_id.strip():
        raise ValidationError("Missing required parameter. Please provide a place ID.")

    try:
        payload = google_places.place_details(place_id, get_settings().google_api_key)
    except UpstreamError as exc:
        logger.exception("Error fetching mosque details: %s", exc)
        return _upstream_failure("Failed to fetch mosque details", exc)

    return jsonify(payload), 200


@app.get("/api/mosques/photo/", defaults={"photo_reference": ""})
@app.get("/api/mosques/photo/<photo_reference>")
def mosque_photo(photo_reference: str) -> Any:
    if not photo_reference.strip():
        raise ValidationError("Missing required parameter. Please provide a photo reference.")

    settings = get_settings()
    max_width = request.args.get("maxwidth") or settings.default_photo_max_width

    try:
        upstream = google_places.place_photo(photo_reference, settings.google_api_key, max_width)
    except UpstreamError as exc:
        logger.exception("Error fetching mosque photo: %s", exc)
        return _upstream_failure("Failed to fetch mosque photo", exc)

    return Response(
        stream_with_context(_relay(upstream)),
        status=200,
        content_type=upstream.headers.get("Content-Type"),
    )


# ---------- Internals ----------


def _relay(upstream: requests.Response) -> Iterator[bytes]:
    try:
        for chunk in upstream.iter_content(chunk_size=_PHOTO_CHUNK_SIZE):
            if chunk:
                yield chunk
    finally:
        upstream.close()


def main() -> None:
    port = get_settings().port
    logger.info("[BOOT] Binding on 0.0.0.0:%d", port)
    logger.info("[BOOT] Access the API at http://localhost:%d", port)
    app.run(host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
