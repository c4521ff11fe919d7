"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_WORK_WEEK_HOURS = 40.0
DEFAULT_HOUR_RATIO_LIMIT = 1.5
DEFAULT_KNOWN_IMPORT_SOURCES = ("itknecht",)
DEFAULT_EMPLOYER_PREFIX = "Buddy"

# Starter settings of the seed employer created for an empty tenant.
SEED_EMPLOYER_NAME = "Buddy BV"
SEED_REGISTRATION_CODE = "00000000"
SEED_TAX_NUMBER = "NL000000000B01"
SEED_COLLECTIVE_AGREEMENT = "Algemeen"
SEED_TRAVEL_ALLOWANCE_PER_KM = 0.23
SEED_HOLIDAY_ALLOWANCE_PERCENTAGE = 8.0
SEED_PENSION_CONTRIBUTION_PERCENTAGE = 3.0
