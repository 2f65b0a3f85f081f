"""
Central configuration for gis settings.
"""
import os


# Logging
LOG_DIR: str = os.getenv("LOG_DIR", os.path.join(os.path.dirname(__file__), "..", "logs"))
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
RING_BUFFER_SIZE: int = int(os.getenv("RING_BUFFER_SIZE", "2000"))
RING_BUFFER_MIN_LEVEL: str = os.getenv("RING_BUFFER_MIN_LEVEL", "INFO").upper()

# Map links (command line defaults)
GIS_MAP_ZOOM: int = int(os.getenv("GIS_MAP_ZOOM", "10"))
GIS_MAP_HTTPS: bool = os.getenv("GIS_MAP_HTTPS", "false").strip().lower() in ("1", "true", "yes")
