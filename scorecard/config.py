# scorecard/config.py
import os

ENGINE_VERSION = "0.1.0"

RATING_MIN = 0.0
RATING_MAX = 10.0

WEIGHT_MIN = 0.0
WEIGHT_MAX = 1.0
WEIGHT_SUM_TOLERANCE = 0.01

# impact/effort matrix is split at the midpoint of the 0-10 domain
QUADRANT_SPLIT = 5.0

DEFAULT_TITLE = "Untitled Use Case"
ID_PREFIX = "uc"

LOG_LEVEL = os.environ.get("SCORECARD_LOG_LEVEL", "INFO").upper()
