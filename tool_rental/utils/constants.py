# tool_rental/utils/constants.py

"""
Global constants for dates, money and commission tiers.
These constants are imported by both models and services.
"""
from decimal import Decimal

# Date format (used for rental start/end)
DATE_FMT = "%Y-%m-%d"
# Grouping key of the monthly commission report
MONTH_FMT = "%Y-%m"

CENT = Decimal("0.01")
SECONDS_PER_DAY = 24 * 60 * 60

# (upper bound inclusive, flat commission); rates above the last bound pay TOP_COMMISSION
COMMISSION_TIERS = (
    (Decimal("30"), Decimal("2")),
    (Decimal("50"), Decimal("5")),
)
TOP_COMMISSION = Decimal("10")

# Catalog the source application starts with
SAMPLE_TOOLS = (
    ("Power Drill", "Professional grade power drill with multiple attachments", "25.00"),
    ("Lawn Mower", "Gas-powered lawn mower, perfect for medium-sized lawns", "45.00"),
    ("Pressure Washer", "High-pressure water cleaner for outdoor surfaces", "35.00"),
)
