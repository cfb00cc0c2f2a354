"""
Constants declarations for azimuth
"""

# Mean Earth Radius (meters), used for all spherical calculations
EARTH_RADIUS_METERS = 6_371_009.0

# Multipliers from meters to each supported distance unit
UNIT_FACTORS = {
    'm': 1.0,
    'km': 0.001,
    'ft': 3.28084,
    'yd': 1.0936,
    'mi': 0.000621371,
    'nm': 0.000539957,
}

GREAT_CIRCLE = 'great-circle'
RHUMB_LINE = 'rhumb-line'
FORMULAS = (GREAT_CIRCLE, RHUMB_LINE)

# Ordered clockwise from north
COMPASS_LABELS = (
    'N', 'NNE', 'NE', 'ENE', 'E', 'ESE', 'SE', 'SSE',
    'S', 'SSW', 'SW', 'WSW', 'W', 'WNW', 'NW', 'NNW',
)

# Number of compass sectors per direction precision
COMPASS_SECTORS = {1: 4, 2: 8, 3: 16}

MAX_DECIMAL_PRECISION = 15

# Below this, a rhumb line is treated as a pure east-west course
RHUMB_EPSILON = 1e-11
