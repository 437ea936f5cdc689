from __future__ import annotations

"""
Column schema of the trip-safety CSV files and default experiment settings.
"""

TRAIN_COLUMNS = [
    "ID",
    "SOURCE",
    "DIST",
    "CYCLES",
    "COMPLEXITY",
    "CARGO",
    "STOPS",
    "START_DAY",
    "START_MONTH",
    "START_DAY_OF_MONTH",
    "START_DAY_OF_WEEK",
    "START_TIME",
    "DAYS",
    "PILOT",
    "PILOT2",
    "PILOT_EXP",
    "PILOT_VISITS_PREV",
    "PILOT_HOURS_PREV",
    "PILOT_DUTY_HOURS_PREV",
    "PILOT_DIST_PREV",
    "ROUTE_RISK_1",
    "ROUTE_RISK_2",
    "WEATHER",
    "VISIBILITY",
    "TRAF0",
    "TRAF1",
    "TRAF2",
    "TRAF3",
    "TRAF4",
    # event counts, only present in training data
    "ACCEL_CNT",
    "DECEL_CNT",
    "SPEED_CNT",
    "STABILITY_CNT",
    "EVT_CNT",
]

TEST_NCOLS = TRAIN_COLUMNS.index("TRAF4") + 1
TEST_COLUMNS = TRAIN_COLUMNS[:TEST_NCOLS]

FEATURE_COLUMNS = TRAIN_COLUMNS[TRAIN_COLUMNS.index("SOURCE") : TEST_NCOLS]
LABEL_COLUMN = "EVT_CNT"
TIME_COLUMN = "START_TIME"

DEFAULT_CSV_PATH = "data/exampleData.csv"
DEFAULT_SEED = 1
DEFAULT_TEST_SIZE = 0.33
DEFAULT_C = 0.03
DEFAULT_MAX_ITER = 200
# a trip is flagged as an expected event at or above this probability
DEFAULT_EVENT_THRESHOLD = 0.5
