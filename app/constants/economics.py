"""
Pricing and impact tables for the economic-impact calculator.
Prices are per ton; treatment costs are per acre.
"""
from types import MappingProxyType

CROP_PRICES = MappingProxyType({
    'Apple': 2.50,
    'Tomato': 1.80,
    'Corn': 0.15,
    'Potato': 0.80,
    'Grape': 3.20,
})
DEFAULT_CROP_PRICE = 1.0

# fraction of yield lost
YIELD_LOSS = MappingProxyType({
    'none': 0.0,
    'low': 0.1,
    'moderate': 0.3,
    'high': 0.6,
})

TREATMENT_COST_PER_ACRE = MappingProxyType({
    'none': 0.0,
    'low': 25.0,
    'moderate': 75.0,
    'high': 150.0,
})

# evaluated in order, first match wins
SEVERITY_RULES = (
    ('none', ('healthy',)),
    ('high', ('late blight', 'black rot', 'bacterial spot')),
    ('moderate', ('early blight', 'scab', 'rust')),
)
DEFAULT_SEVERITY = 'low'
