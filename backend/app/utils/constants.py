from typing import Dict, Tuple

TAX_YEAR = 2026

DISCLAIMER = (
    "Estimates only. Uses the standard deduction and flat effective state rates; "
    "credits, itemized deductions and local taxes are not included."
)

DEFAULT_STATE = "Texas"

# Representative salaries linked from every calculator page
POPULAR_SALARY_AMOUNTS: Tuple[int, ...] = (
    30000,
    40000,
    50000,
    60000,
    70000,
    80000,
    90000,
    100000,
    120000,
    150000,
)

# Estimated flat effective rates applied to gross income
STATE_TAX_RATES: Dict[str, float] = {
    "Alabama": 0.04,
    "Alaska": 0.0,
    "Arizona": 0.025,
    "Arkansas": 0.039,
    "California": 0.093,
    "Colorado": 0.044,
    "Connecticut": 0.0699,
    "Delaware": 0.066,
    "Florida": 0.0,
    "Georgia": 0.0499,
    "Hawaii": 0.11,
    "Idaho": 0.058,
    "Illinois": 0.0495,
    "Indiana": 0.0305,
    "Iowa": 0.038,
    "Kansas": 0.057,
    "Kentucky": 0.04,
    "Louisiana": 0.0425,
    "Maine": 0.0715,
    "Maryland": 0.0575,
    "Massachusetts": 0.05,
    "Michigan": 0.0425,
    "Minnesota": 0.0985,
    "Mississippi": 0.047,
    "Missouri": 0.048,
    "Montana": 0.059,
    "Nebraska": 0.0584,
    "Nevada": 0.0,
    "New Hampshire": 0.0,
    "New Jersey": 0.1075,
    "New Mexico": 0.059,
    "New York": 0.065,
    "North Carolina": 0.0399,
    "North Dakota": 0.0195,
    "Ohio": 0.035,
    "Oklahoma": 0.0475,
    "Oregon": 0.099,
    "Pennsylvania": 0.0307,
    "Rhode Island": 0.0599,
    "South Carolina": 0.064,
    "South Dakota": 0.0,
    "Tennessee": 0.0,
    "Texas": 0.0,
    "Utah": 0.0465,
    "Vermont": 0.0875,
    "Virginia": 0.0575,
    "Washington": 0.0,
    "West Virginia": 0.055,
    "Wisconsin": 0.0765,
    "Wyoming": 0.0,
    "District of Columbia": 0.0895,
}

STATE_CODES: Dict[str, str] = {
    "Alabama": "AL",
    "Alaska": "AK",
    "Arizona": "AZ",
    "Arkansas": "AR",
    "California": "CA",
    "Colorado": "CO",
    "Connecticut": "CT",
    "Delaware": "DE",
    "Florida": "FL",
    "Georgia": "GA",
    "Hawaii": "HI",
    "Idaho": "ID",
    "Illinois": "IL",
    "Indiana": "IN",
    "Iowa": "IA",
    "Kansas": "KS",
    "Kentucky": "KY",
    "Louisiana": "LA",
    "Maine": "ME",
    "Maryland": "MD",
    "Massachusetts": "MA",
    "Michigan": "MI",
    "Minnesota": "MN",
    "Mississippi": "MS",
    "Missouri": "MO",
    "Montana": "MT",
    "Nebraska": "NE",
    "Nevada": "NV",
    "New Hampshire": "NH",
    "New Jersey": "NJ",
    "New Mexico": "NM",
    "New York": "NY",
    "North Carolina": "NC",
    "North Dakota": "ND",
    "Ohio": "OH",
    "Oklahoma": "OK",
    "Oregon": "OR",
    "Pennsylvania": "PA",
    "Rhode Island": "RI",
    "South Carolina": "SC",
    "South Dakota": "SD",
    "Tennessee": "TN",
    "Texas": "TX",
    "Utah": "UT",
    "Vermont": "VT",
    "Virginia": "VA",
    "Washington": "WA",
    "West Virginia": "WV",
    "Wisconsin": "WI",
    "Wyoming": "WY",
    "District of Columbia": "DC",
}
