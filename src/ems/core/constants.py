"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time
from decimal import Decimal

NAME_MAX_LENGTH = 100
STATUS_MAX_LENGTH = 50
LEAVE_TYPE_MAX_LENGTH = 50
TITLE_MAX_LENGTH = 200
USERNAME_MAX_LENGTH = 50
ROLE_MAX_LENGTH = 50

MIN_PASSWORD_LENGTH = 6

PAYROLL_MIN_YEAR = 2000
PAYROLL_MAX_YEAR = 2100

# Precision and scale of the Numeric columns.
MONEY_MAX_DIGITS = 18
MONEY_PLACES = 2
SCORE_MAX_DIGITS = 4
SCORE_PLACES = 2

MIN_SCORE = Decimal("1.0")
MAX_SCORE = Decimal("5.0")

DEFAULT_CHECK_IN_TIME = time(9, 0)
DEFAULT_ATTENDANCE_STATUS = "Present"
DEFAULT_LEAVE_STATUS = "Pending"
DEFAULT_TRAINING_STATUS = "Scheduled"
DEFAULT_COMPLIANCE_STATUS = "Pending"
DEFAULT_PERFORMANCE_SCORE = Decimal("3.0")
DEFAULT_ROLE = "User"
