from decimal import Decimal
from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"
MEALS_PER_DAY: Final[int] = 3
DAYS_PER_WEEK: Final[int] = 7
MEALS_PER_WEEK: Final[int] = DAYS_PER_WEEK * MEALS_PER_DAY
# Recipes may cost up to this multiple of the per-meal budget
BUDGET_SLACK_FACTOR: Final[Decimal] = Decimal(2)
# 0 = Sunday, 6 = Saturday
DAY_NAMES: Final[tuple[str, ...]] = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"
)
