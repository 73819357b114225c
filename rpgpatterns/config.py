"""Central configuration defaults and constants for rpgpatterns."""

import os

# Weight Modifier Defaults
DEFAULT_FEATHER_WEIGHT_FACTOR = float(os.getenv("RPGPATTERNS_FEATHER_WEIGHT_FACTOR", "0.7"))
DEFAULT_HEAVY_WEIGHT_OFFSET = float(os.getenv("RPGPATTERNS_HEAVY_WEIGHT_OFFSET", "0.32"))  # Subtracted before scaling
DEFAULT_HEAVY_WEIGHT_FACTOR = float(os.getenv("RPGPATTERNS_HEAVY_WEIGHT_FACTOR", "1.7"))

# Logging Defaults
DEFAULT_LOG_LEVEL = os.getenv("RPGPATTERNS_LOG_LEVEL", "WARNING").upper()
DEFAULT_LOG_FORMAT = os.getenv("RPGPATTERNS_LOG_FORMAT", "[%(name)-19s - %(levelname)5s] %(message)s")
