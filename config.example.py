# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "SCAVENGER_APP_NAME": "Checklist title (default: Scavenger Hunt).",
    "SCAVENGER_LOG_LEVEL": "Console logging level (default: INFO).",
    "SCAVENGER_DATA_DIR": "Local data directory for logs (default: .local/scavenger_hunt).",
    # Environment
    "SCAVENGER_ENVIRONMENT": (
        "sandbox (fixed fallback coordinate) or device (live location fixes). Default: sandbox."
    ),
    "SCAVENGER_CAMERA_AVAILABLE": "Whether a camera source exists (true/false, default false).",
    "SCAVENGER_FALLBACK_LATITUDE": "Sandbox coordinate latitude (default: 37.3349).",
    "SCAVENGER_FALLBACK_LONGITUDE": "Sandbox coordinate longitude (default: -122.0090).",
    # Map
    "SCAVENGER_MAP_SPAN_DEGREES": "Map viewport span in degrees (default: 0.01).",
    # Inputs
    "SCAVENGER_LIBRARY_DIR": "Directory relative photo paths resolve against (default: .).",
    "SCAVENGER_SEED_PATH": 'Optional JSON checklist: [{"title": ..., "description": ...}].',
    "SCAVENGER_LOCATION_REPLAY": (
        'Optional fixes replayed in device mode, "lat,lon;lat,lon". Empty => /fix command.'
    ),
    "SCAVENGER_LOCATION_REPLAY_INTERVAL": "Seconds between replayed fixes (default: 1.0).",
}
