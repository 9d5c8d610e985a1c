"""Core constants used across KartStats modules.

This module centralizes source column offsets, markers, and file names.
Keeping values here avoids magic literals in parsing and validation logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_SOURCE_DIR = Path("statpedia")
DEFAULT_DATA_DIR = Path("data")
DEFAULT_COVERAGE_TOLERANCE = 5.0

CHARACTERS_SOURCE_FILE_NAME = "characters.csv"
VEHICLES_SOURCE_FILE_NAME = "vehicles.csv"
TRACKS_SOURCE_FILE_NAME = "surface-coverage.csv"

CHARACTERS_FILE_NAME = "characters.json"
VEHICLES_FILE_NAME = "vehicles.json"
TRACKS_FILE_NAME = "tracks.json"
DATA_VERSION_FILE_NAME = "data_version.json"
DATA_VERSION_FORMAT = "%Y-%m-%d"

CHARACTERS_COLLECTION = "characters"
VEHICLES_COLLECTION = "vehicles"
TRACKS_COLLECTION = "tracks"
COLLECTION_NAMES = (CHARACTERS_COLLECTION, VEHICLES_COLLECTION, TRACKS_COLLECTION)

# Character and vehicle tables share name and stat columns.
NAME_COLUMNS = (3, 4, 5, 6)
SPEED_ROAD_COLUMN = 7
SPEED_ROUGH_COLUMN = 8
SPEED_WATER_COLUMN = 9
ACCELERATION_COLUMN = 10
MINI_TURBO_COLUMN = 11
WEIGHT_COLUMN = 12
COIN_CURVE_COLUMN = 13
HANDLING_ROAD_COLUMN = 14
HANDLING_ROUGH_COLUMN = 15
HANDLING_WATER_COLUMN = 16

VEHICLE_CLASS_COLUMN = 1
VEHICLE_TAG_COLUMN = 2
VEHICLE_HEADER_TOKEN = "class"
UNTAGGED_VEHICLE_TAG = "untagged"

TRACK_NAME_COLUMN = 1
COVERAGE_ROAD_COLUMN = 3
COVERAGE_ROUGH_COLUMN = 4
COVERAGE_WATER_COLUMN = 5
COVERAGE_NEUTRAL_COLUMN = 6
COVERAGE_OFF_ROAD_COLUMN = 7
ADJUSTED_ROAD_COLUMN = 8
ADJUSTED_ROUGH_COLUMN = 9
ADJUSTED_WATER_COLUMN = 10

TRACK_SECTION_START_MARKER = "Regular Tracks"
TRACK_SECTION_STOP_MARKER = "Knock-Out Tour"
TRACK_HEADER_TOKENS = ("track", "name")
TRACK_INFO_GLYPH = "ℹ"
TRACK_SKIP_PATTERNS = (
    "average",
    "the following",
    "surface coverage",
    "info:",
    "summary",
)
UNKNOWN_CUP = "Unknown Cup"

SLUG_PATTERN = r"^[a-z][a-z0-9]*(-[a-z0-9]+)*$"
MAX_ID_LENGTH = 64
STAT_MIN = 0
STAT_MAX = 20
COVERAGE_MIN = 0.0
COVERAGE_MAX = 100.0
TERRAIN_SUM_TOLERANCE = 0.05
ROW_SNIPPET_LENGTH = 80
