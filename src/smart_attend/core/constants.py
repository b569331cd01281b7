"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_CLASS_NAME = "Computer Science 101"
DEFAULT_TOKEN_TTL_HOURS = 24

SESSION_CODE_PREFIX = "ATT"
SESSION_CODE_SUFFIX_LENGTH = 8
SESSION_CODE_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"

DEPARTMENTS = ("CSE", "ECE", "EEE", "IT", "MECH")

AT_RISK_THRESHOLD = 75
EXCELLENT_THRESHOLD = 85
CRITICAL_THRESHOLD = 60
WARNING_THRESHOLD = 70

# Illustrative dashboard series, not derived from session history
ATTENDANCE_TREND_BASE = (88, 90, 85, 87)
MARKS_TREND = (82, 88, 85)
SUBJECT_ATTENDANCE = (
    ("Cyber Security", 90),
    ("IoT", 85),
    ("Cloud Computing", 88),
    ("Python", 92),
    ("DSA", 87),
)
