"""Centralized configuration for GoldCalc.

This module contains the day-count basis, input bounds, presets and other
business rule constants shared by the calculators.
"""

# =============================================================================
# INTEREST
# =============================================================================

# Fixed day-count basis (no leap-year adjustment)
DAYS_PER_YEAR = 365

# Flat conversion factor between monthly and yearly rates
MONTHS_PER_YEAR = 12

# Accepted rate bounds (percent)
MIN_INTEREST_RATE = 0
MAX_INTEREST_RATE = 100

# =============================================================================
# PURITY
# =============================================================================

# Purity bounds (percent of fine metal by weight)
MIN_PURITY = 0
MAX_PURITY = 100

# Default purity of metal added when enriching an alloy
DEFAULT_ADDED_METAL_PURITY = 100

# Relative tolerance under which two purities or weights are treated as equal
PURITY_EPSILON = 1e-9

# Karat scale (24k is pure)
FULL_KARAT = 24

# Common gold purity presets shown to users
COMMON_PURITIES = {
    "22k": 91.6,
    "18k": 75.0,
    "14k": 58.3,
    "10k": 41.7,
    "9k": 37.5,
    "8k": 33.3,
}

# =============================================================================
# AMOUNT
# =============================================================================

# 22k rate is derived from the 24k rate by this karat ratio
RATE_22K_KARAT = 22

# =============================================================================
# DATES
# =============================================================================

# Supported calendar years (inclusive)
MIN_YEAR = 1901
MAX_YEAR = 2099

# Date format for raw input (ISO 8601)
DATE_FORMAT_INPUT = "%Y-%m-%d"

# Date format for display
DATE_FORMAT_DISPLAY = "%d %b %Y"

# =============================================================================
# SESSION
# =============================================================================

# Snapshot keys, one per calculator
SESSION_KEY_INTEREST = "interestCalculator"
SESSION_KEY_PURITY = "purityCalculator"
SESSION_KEY_AMOUNT = "amountCalculator"

CALCULATOR_KEYS = (SESSION_KEY_INTEREST, SESSION_KEY_PURITY, SESSION_KEY_AMOUNT)

# Default display language for number-to-words
DEFAULT_LANGUAGE = "en"
