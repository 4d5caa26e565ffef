"""
Mock market prices (INR per kg) for major Indian crops.
"""
from types import MappingProxyType


def _p(current, weekly, monthly, trend='rising'):
    return MappingProxyType({'current': current, 'weekly': weekly, 'monthly': monthly, 'trend': trend})


MARKET_PRICES = MappingProxyType({
    'rice': _p(55, 52, 58),
    'wheat': _p(28, 30, 26, 'falling'),
    'maize': _p(22, 20, 24),
    'sugarcane': _p(18, 16, 20),
    'cotton': _p(65, 70, 60, 'falling'),
    'tomato': _p(45, 42, 48),
    'potato': _p(25, 28, 22, 'falling'),
    'onion': _p(35, 30, 40),
    'chili': _p(120, 110, 130),
    'turmeric': _p(85, 80, 90),
    'ginger': _p(95, 90, 100),
    'garlic': _p(75, 70, 80),
    'cabbage': _p(20, 18, 22),
    'cauliflower': _p(25, 22, 28),
    'brinjal': _p(30, 28, 32),
    'okra': _p(40, 35, 45),
    'cucumber': _p(15, 12, 18),
    'bottle gourd': _p(18, 16, 20),
    'bitter gourd': _p(35, 32, 38),
    'ridge gourd': _p(22, 20, 24),
    'spinach': _p(12, 10, 14),
    'coriander': _p(8, 6, 10),
    'mint': _p(15, 12, 18),
    'fenugreek': _p(25, 22, 28),
    'mustard': _p(45, 42, 48),
    'sunflower': _p(55, 50, 60),
    'groundnut': _p(65, 60, 70),
    'sesame': _p(85, 80, 90),
    'soybean': _p(35, 32, 38),
    'chickpea': _p(45, 42, 48),
    'lentil': _p(55, 50, 60),
    'black gram': _p(65, 60, 70),
    'green gram': _p(45, 42, 48),
    'pigeon pea': _p(55, 50, 60),
    'mango': _p(80, 75, 85),
    'banana': _p(25, 22, 28),
    'papaya': _p(15, 12, 18),
    'guava': _p(30, 28, 32),
    'pomegranate': _p(120, 110, 130),
    'grapes': _p(60, 55, 65),
    'orange': _p(35, 32, 38),
    'lemon': _p(20, 18, 22),
    'coconut': _p(8, 7, 9),
    'cashew': _p(180, 170, 190),
    'almond': _p(220, 200, 240),
    'walnut': _p(250, 240, 260),
    'cardamom': _p(1200, 1100, 1300),
    'pepper': _p(180, 170, 190),
    'cinnamon': _p(150, 140, 160),
    'clove': _p(200, 190, 210),
    'nutmeg': _p(160, 150, 170),
    'vanilla': _p(800, 750, 850),
})

FALLBACK_PRICES = _p(30, 28, 32, 'stable')
