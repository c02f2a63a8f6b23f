import json
import logging
from typing import Dict

import requests
from botocore.exceptions import ClientError
from pydantic import ValidationError

from ..config import CORS_ORIGIN
from ..errors import GooglePlacesError
from ..models.api import NearbyQuery
from ..utils.general_utils import get_google_places_client

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": CORS_ORIGIN,
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def _response(status_code: int, body: str = "") -> Dict:
    return {
        "statusCode": status_code,
        "body": body,
        "headers": {"Content-Type": "application/json", **CORS_HEADERS},
    }


def _error(status_code: int, message: str) -> Dict:
    return _response(status_code, json.dumps({"error": message}))


def _request_method(event: Dict) -> str:
    method = event.get("httpMethod")
    if method is None:
        method = event.get("requestContext", {}).get("http", {}).get("method", "GET")
    return method.upper()


def _describe_validation_error(error: ValidationError) -> str:
    first = error.errors()[0]
    field = first["loc"][0] if first["loc"] else "request"
    names = {
        "lat": "latitude",
        "lng": "longitude",
        "minprice": "min price",
        "maxprice": "max price",
        "type": "place type",
    }
    return f"Invalid {names.get(field, field)}"


def handler(event, context):
    """Search for places near ``lat``/``lng`` with the requested filters."""
    if _request_method(event) == "OPTIONS":
        return _response(200)

    params = event.get("queryStringParameters") or {}

    try:
        query = NearbyQuery.model_validate(params)
    except ValidationError as e:
        logger.warning(f"Rejected nearby query {params}: {str(e)}")
        return _error(400, _describe_validation_error(e))

    try:
        google_places_client = get_google_places_client()
    except (ValueError, ClientError) as e:
        logger.error(f"Google Maps API key unavailable: {str(e)}")
        return _error(500, "API Key is required")

    try:
        results = google_places_client.search_nearby(
            latitude=query.lat,
            longitude=query.lng,
            radius=query.radius,
            place_type=query.place_type,
            open_now=query.open_now,
            min_price=query.min_price,
            max_price=query.max_price,
        )
    except (requests.RequestException, GooglePlacesError) as e:
        logger.exception(f"Error searching nearby places: {str(e)}")
        return _error(500, "Failed to search nearby places")

    logger.info(f"Returning {len(results)} nearby places for {query.lat},{query.lng}")
    return _response(200, json.dumps(results))
