"""
Economic impact of a detected disease on a farm.

compute(disease, crop_type, farm_size, current_yield) -> EconomicImpactResult

1.  **Severity** comes from the disease name alone, by substring rules
    (healthy > high-impact diseases > moderate diseases > everything else).
2.  **Yield loss** is a fixed fraction per severity; the lost tonnage is
    valued at the crop's base price per ton.
3.  **Treatment cost** is a fixed cost per acre, times the farm size.
4.  **ROI** of treating is (revenue saved - treatment cost) / treatment cost,
    in percent. Healthy crops have no treatment cost, hence no ROI.
"""
import math

from app.constants.economics import (
    CROP_PRICES,
    DEFAULT_CROP_PRICE,
    YIELD_LOSS,
    TREATMENT_COST_PER_ACRE,
    SEVERITY_RULES,
    DEFAULT_SEVERITY,
)
from app.exceptions import ClientInputError, ErrorCode
from app.schemas.economics import EconomicImpactResult


def disease_severity(disease: str) -> str:
    name = disease.lower()
    for severity, needles in SEVERITY_RULES:
        if any(needle in name for needle in needles):
            return severity
    return DEFAULT_SEVERITY


def crop_price(crop_type: str) -> float:
    return CROP_PRICES.get(crop_type, DEFAULT_CROP_PRICE)


def compute(disease: str, crop_type: str, farm_size: float, current_yield: float) -> EconomicImpactResult:
    base_price = crop_price(crop_type)
    severity = disease_severity(disease)
    loss_fraction = YIELD_LOSS[severity]
    cost_per_acre = TREATMENT_COST_PER_ACRE[severity]

    potential_yield = current_yield * (1 - loss_fraction)
    yield_loss_amount = current_yield - potential_yield
    revenue_loss = yield_loss_amount * base_price
    treatment_cost = cost_per_acre * farm_size
    net_loss = revenue_loss + treatment_cost

    roi = None
    if treatment_cost != 0:
        roi = round((revenue_loss - treatment_cost) / treatment_cost * 100, 2)

    # float overflow on huge inputs; the JSON response cannot carry inf or nan
    derived = (potential_yield, yield_loss_amount, revenue_loss, treatment_cost, net_loss, roi or 0.0)
    if not all(math.isfinite(value) for value in derived):
        raise ClientInputError(ErrorCode.INVALID_PAYLOAD, detail="farmSize and currentYield are out of range")

    return EconomicImpactResult(
        cropType=crop_type,
        disease=disease,
        severity=severity,
        farmSize=farm_size,
        currentYield=current_yield,
        potentialYield=round(potential_yield, 2),
        yieldLossPct=round(loss_fraction * 100),
        yieldLossAmount=round(yield_loss_amount, 2),
        basePrice=base_price,
        revenueLoss=round(revenue_loss, 2),
        treatmentCost=round(treatment_cost, 2),
        netLoss=round(net_loss, 2),
        roi=roi,
    )
