"""
AWS cost estimation.

- regions: the static per-region pricing table
- estimator: tier selection and per-shape cost formulas
"""

from .regions import (
    PRICING_TABLE_VERSION,
    REGION_PRICING,
    AwsRegion,
    RegionPricing,
    get_region_pricing,
)
from .estimator import (
    HOURS_PER_MONTH,
    MAX_MEMORY_GB_PER_VCPU,
    VCPU_TIERS,
    CostEstimator,
    select_memory_gb,
    select_vcpu_tier,
)

__all__ = [
    "PRICING_TABLE_VERSION",
    "REGION_PRICING",
    "AwsRegion",
    "RegionPricing",
    "get_region_pricing",
    "HOURS_PER_MONTH",
    "MAX_MEMORY_GB_PER_VCPU",
    "VCPU_TIERS",
    "CostEstimator",
    "select_memory_gb",
    "select_vcpu_tier",
]
