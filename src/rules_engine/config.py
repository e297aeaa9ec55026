# Deviation returned whenever a series has no data for the requested slot
NEUTRAL_DEVIATION = 1.0

# Asset productivity levels (level 0 is reserved, like round 0)
MIN_LEVEL = 1
MAX_LEVEL = 3

# Forecast labels
WATER_NORMAL = "Normal"
WATER_BELOW_NORMAL = "Below Normal"
WATER_DROUGHT = "Drought"

ECONOMY_GOOD = "Good"
ECONOMY_NORMAL = "Normal"
ECONOMY_BELOW_NORMAL = "Below Normal"
ECONOMY_RECESSION = "Recession"

# Forecast thresholds as (inclusive lower bound, label), highest first.
# A deviation below every bound gets the fallback label.
WATER_FORECAST_THRESHOLDS = (
    (1.0, WATER_NORMAL),
    (0.65, WATER_BELOW_NORMAL),
)
WATER_FORECAST_FALLBACK = WATER_DROUGHT

ECONOMIC_FORECAST_THRESHOLDS = (
    (1.65, ECONOMY_GOOD),
    (1.0, ECONOMY_NORMAL),
    (0.65, ECONOMY_BELOW_NORMAL),
)
ECONOMIC_FORECAST_FALLBACK = ECONOMY_RECESSION

# Decimal places kept before generated water and revenue are rounded to whole units
GENERATION_PRECISION = 9
