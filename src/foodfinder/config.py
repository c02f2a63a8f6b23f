"""Environment-driven settings for Food Finder."""

import os

# Nearby search backend used by the session
BACKEND_URL = os.environ.get("FOODFINDER_BACKEND_URL", "http://localhost:8000")
BACKEND_TIMEOUT_SECONDS = float(os.environ.get("FOODFINDER_BACKEND_TIMEOUT", "10"))

# Front end origin allowed to call the nearby handler
CORS_ORIGIN = os.environ.get("FOODFINDER_CORS_ORIGIN", "http://localhost:3000")

GOOGLE_MAPS_API_KEY_ENV = "GOOGLE_MAPS_API_KEY"
GOOGLE_MAPS_API_KEY_SECRET_NAME = os.environ.get(
    "GOOGLE_MAPS_API_KEY_SECRET_NAME", "food-finder/google-maps-api-key"
)

IP_GEOLOCATION_URL = os.environ.get("IP_GEOLOCATION_URL", "https://ipapi.co/json/")

DEFAULT_RADIUS_METERS = 1000
DEFAULT_MAP_ZOOM = 15
