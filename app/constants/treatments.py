"""
Treatment advice keyed by exact disease name.
"""
from types import MappingProxyType

from app.schemas.detection import TreatmentEntry

_HEALTHY_PREVENTION = 'Maintain regular monitoring, proper watering, and balanced fertilization.'
_HEALTHY_MONTHLY = 'Continue current care practices. Apply compost tea monthly for plant health.'

TREATMENTS = MappingProxyType({
    'Apple Scab': TreatmentEntry(
        organic='Apply copper fungicide spray every 7-10 days during wet weather. Remove fallen leaves and prune for better air circulation. Use neem oil as organic alternative.',
        prevention='Plant resistant varieties like Liberty or Enterprise. Maintain proper spacing (15-20 feet), ensure good drainage, and prune annually.',
        severity='moderate',
        urgency='Treat within 1-2 weeks',
    ),
    'Apple Black Rot': TreatmentEntry(
        organic='Remove infected fruit and branches immediately. Apply sulfur-based fungicide during bloom period. Use baking soda spray (1 tbsp per gallon) as organic option.',
        prevention='Prune trees to improve air circulation, avoid overhead watering, remove mummified fruit, and sanitize pruning tools.',
        severity='high',
        urgency='Treat immediately',
    ),
    'Apple Cedar Rust': TreatmentEntry(
        organic='Apply copper fungicide in early spring before bud break. Remove nearby cedar trees if possible. Use sulfur spray as organic alternative.',
        prevention='Plant resistant varieties, maintain 500+ feet from cedar trees, and apply preventive sprays in early spring.',
        severity='moderate',
        urgency='Treat before bud break',
    ),
    'Apple Healthy': TreatmentEntry(
        organic=_HEALTHY_MONTHLY,
        prevention=_HEALTHY_PREVENTION,
        severity='none',
        urgency='Continue monitoring',
    ),
    'Tomato Late Blight': TreatmentEntry(
        organic='Remove infected plants immediately. Apply copper fungicide preventively during wet weather. Use baking soda spray (1 tsp per quart) as organic option.',
        prevention='Avoid overhead watering, provide good air circulation, plant resistant varieties, and use drip irrigation.',
        severity='high',
        urgency='Treat immediately',
    ),
    'Tomato Early Blight': TreatmentEntry(
        organic='Remove infected leaves immediately. Apply copper fungicide weekly. Use neem oil spray as organic alternative.',
        prevention='Rotate crops annually, avoid overhead watering, mulch around plants, and prune lower leaves.',
        severity='moderate',
        urgency='Treat within 3-5 days',
    ),
    'Tomato Bacterial Spot': TreatmentEntry(
        organic='Remove infected plants immediately. Apply copper fungicide preventively. Use hydrogen peroxide spray (1 tsp per cup) as organic option.',
        prevention='Use disease-free seeds, avoid overhead watering, maintain proper spacing, and sanitize tools.',
        severity='moderate',
        urgency='Treat immediately',
    ),
    'Tomato Healthy': TreatmentEntry(
        organic='Continue current care practices. Apply compost tea bi-weekly for optimal health.',
        prevention=_HEALTHY_PREVENTION,
        severity='none',
        urgency='Continue monitoring',
    ),
    'Corn Common Rust': TreatmentEntry(
        organic='Apply copper fungicide at first sign of disease. Remove infected plant debris after harvest. Use neem oil as organic alternative.',
        prevention='Plant resistant varieties, rotate crops annually, maintain proper spacing, and avoid overhead watering.',
        severity='moderate',
        urgency='Treat within 1 week',
    ),
    'Corn Gray Leaf Spot': TreatmentEntry(
        organic='Apply copper fungicide preventively. Remove infected debris after harvest. Use baking soda spray as organic option.',
        prevention='Plant resistant varieties, rotate crops, maintain proper spacing, and ensure good drainage.',
        severity='moderate',
        urgency='Treat within 1 week',
    ),
    'Corn Healthy': TreatmentEntry(
        organic=_HEALTHY_MONTHLY,
        prevention=_HEALTHY_PREVENTION,
        severity='none',
        urgency='Continue monitoring',
    ),
    'Potato Late Blight': TreatmentEntry(
        organic='Remove infected foliage immediately. Apply copper fungicide preventively. Use baking soda spray as organic alternative.',
        prevention='Plant certified disease-free seed potatoes, avoid overhead watering, rotate crops, and hill soil around plants.',
        severity='high',
        urgency='Treat immediately',
    ),
    'Potato Early Blight': TreatmentEntry(
        organic='Remove infected leaves immediately. Apply copper fungicide weekly. Use neem oil spray as organic option.',
        prevention='Rotate crops annually, avoid overhead watering, mulch around plants, and ensure good drainage.',
        severity='moderate',
        urgency='Treat within 3-5 days',
    ),
    'Potato Healthy': TreatmentEntry(
        organic=_HEALTHY_MONTHLY,
        prevention=_HEALTHY_PREVENTION,
        severity='none',
        urgency='Continue monitoring',
    ),
    'Grape Black Rot': TreatmentEntry(
        organic='Remove infected clusters immediately. Apply copper fungicide preventively. Use sulfur spray as organic alternative.',
        prevention='Prune vines for air circulation, avoid overhead watering, remove infected debris, and maintain proper spacing.',
        severity='high',
        urgency='Treat immediately',
    ),
    'Grape Esca': TreatmentEntry(
        organic='Remove infected vines immediately. Apply copper fungicide to cuts. Use hydrogen peroxide spray as organic option.',
        prevention='Prune during dry weather, sanitize pruning tools, avoid wounding vines, and maintain vine health.',
        severity='moderate',
        urgency='Treat immediately',
    ),
    'Grape Healthy': TreatmentEntry(
        organic=_HEALTHY_MONTHLY,
        prevention=_HEALTHY_PREVENTION,
        severity='none',
        urgency='Continue monitoring',
    ),
})

FALLBACK_TREATMENT = TreatmentEntry(
    organic='Monitor plant health regularly and maintain good cultural practices. Apply organic fungicide preventively. Consult local agricultural extension for specific recommendations.',
    prevention='Ensure proper spacing, good drainage, regular monitoring for early detection, and crop rotation.',
    severity='unknown',
    urgency='Monitor closely',
)
