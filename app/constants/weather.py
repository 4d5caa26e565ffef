"""
City coordinates for the weather lookup and the readings served when the
upstream API cannot be reached.
"""
from types import MappingProxyType

DEFAULT_CITY = 'mumbai'

CITY_COORDS = MappingProxyType({
    'mumbai': (19.0760, 72.8777),
    'delhi': (28.7041, 77.1025),
    'bangalore': (12.9716, 77.5946),
    'hyderabad': (17.3850, 78.4867),
    'chennai': (13.0827, 80.2707),
    'kolkata': (22.5726, 88.3639),
    'pune': (18.5204, 73.8567),
    'ahmedabad': (23.0225, 72.5714),
    'jaipur': (26.9124, 75.7873),
    'lucknow': (26.8467, 80.9462),
    'kanpur': (26.4499, 80.3319),
    'nagpur': (21.1458, 79.0882),
    'indore': (22.7196, 75.8577),
    'thane': (19.2183, 72.9781),
    'bhopal': (23.2599, 77.4126),
    'visakhapatnam': (17.6868, 83.2185),
    'pimpri': (18.6298, 73.7997),
    'patna': (25.5941, 85.1376),
    'vadodara': (22.3072, 73.1812),
    'ludhiana': (30.9010, 75.8573),
})

# (temperature °C, relative humidity %)
FALLBACK_READINGS = MappingProxyType({
    'mumbai': (28, 85),
    'delhi': (32, 65),
    'bangalore': (26, 70),
    'hyderabad': (30, 75),
    'chennai': (29, 80),
    'kolkata': (31, 85),
    'pune': (27, 70),
    'ahmedabad': (33, 60),
    'jaipur': (34, 55),
    'lucknow': (30, 70),
    'kanpur': (31, 68),
    'nagpur': (29, 72),
    'indore': (28, 65),
    'thane': (27, 75),
    'bhopal': (29, 70),
    'visakhapatnam': (30, 80),
    'pimpri': (27, 72),
    'patna': (30, 75),
    'vadodara': (32, 68),
    'ludhiana': (33, 60),
})

RISK_MESSAGES = MappingProxyType({
    'low': 'Weather conditions are favorable for healthy crops.',
    'medium': 'Moderate risk conditions detected. Consider preventive measures.',
    'high': 'High humidity and temperature create favorable conditions for fungal diseases. Monitor crops closely.',
})
