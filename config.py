"""
Module: config
Description: Global constants shared by the hull modules, the CLI and the
             runtime experiment. Nothing here is read from files or the
             environment.
"""

import logging

# ---------- Geometry ----------
# Fixed constant on purpose: polar angles must match atan2 scaled by exactly
# this value, not by math.pi.
PI = 3.141592
ANGLE_FACTOR = 180

DEFAULT_COORDINATE_VALUE = 0
COORDINATES_SEPARATOR = ","

# ---------- Graham scan ----------
INITIAL_RESULT_SIZE = 2
RESULT_HEADER = "result"

# ---------- Logging ----------
LOGGER_NAME = "graham_hull"
DEFAULT_LOG_LEVEL = logging.WARNING

# ---------- Runtime experiment ----------
EXPERIMENT_SIZES = (1000, 2000, 4000, 8000, 16000, 32000)
EXPERIMENT_REPEATS = 3
EXPERIMENT_COORD_RANGE = 10_000
EXPERIMENT_SEED = 42
