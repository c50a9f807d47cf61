TERM_MONTHS = 360  # every mortgage runs 30 years
TERM_YEARS = TERM_MONTHS // 12

RENT_GROWTH_RATE = 0.02  # fraction per year
INVESTMENT_RETURN_RATE = 0.03  # fraction per year

# Transfer tax exemption only applies strictly below this price
FIRST_TIME_BUYER_PRICE_LIMIT = 525000.0

MAX_GUARANTEE_PRICE = 435000.0  # mortgage guarantee (NHG) cap, 2024
GUARANTEE_FEE_RATE = 0.007  # fraction of the loan
BANK_GUARANTEE_RATE = 0.001  # fraction of the price

DEFAULT_COMPARISON_YEARS = 10
MAX_COMPARISON_YEARS = 100

# Accepted input ranges, percentage per year
MAX_INTEREST_RATE = 100.0
MIN_APPRECIATION_RATE = -100.0
MAX_APPRECIATION_RATE = 100.0

DEFAULT_VALUES = {
    "price": 310000.0,
    "interest": 4.62,  # percentage
    "deduction": 36.93,  # percentage of interest
    "savings": 40000.0,
    "rent": 1600.0,
    "notary": 1200.0,
    "valuation": 800.0,
    "financial_advisor": 2500.0,
    "real_estate_agent": 2750.0 * 1.21,  # incl. VAT
    "structural_survey": 800.0,
    "is_first_time_buyer": False,
    "transfer_tax_rate": 2.0,  # percentage
    "property_appreciation_rate": 3.0,  # percentage
    "comparison_period_years": DEFAULT_COMPARISON_YEARS,
}

# Indicative fixed rates (percentage) per fixed period in years.
# "NHG" applies to guarantee-eligible loans, numeric keys are max LTV buckets.
INTEREST_RATES = {
    10: {
        "NHG": 4.20,
        0.55: 4.45,
        0.60: 4.47,
        0.65: 4.57,
        0.70: 4.58,
        0.75: 4.59,
        0.80: 4.60,
        0.85: 4.61,
        0.90: 4.62,
        0.95: 4.63,
        1.00: 4.68,
    },
    20: {
        "NHG": 4.45,
        0.55: 4.66,
        0.60: 4.69,
        0.65: 4.76,
        0.70: 4.77,
        0.75: 4.78,
        0.80: 4.79,
        0.85: 4.85,
        0.90: 4.94,
        0.95: 4.98,
        1.00: 5.03,
    },
}
