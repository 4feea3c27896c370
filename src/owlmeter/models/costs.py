"""
Cost estimate data models.

Estimates are derived values, recomputed on demand from ExecutionMetrics
and a region's pricing record; they are never persisted.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..pricing.regions import AwsRegion


@dataclass(frozen=True)
class LambdaCost:
    """Serverless function cost for one execution and for 1M executions."""

    cost_per_execution: float
    monthly_cost_1m: float


@dataclass(frozen=True)
class FargateCost:
    """Managed container task cost for one execution and for 730 hours."""

    cost_per_execution: float
    monthly_cost_continuous: float


@dataclass(frozen=True)
class EksCost:
    """Managed-Kubernetes container task cost, control plane included."""

    cost_per_execution: float
    monthly_cost_continuous: float


@dataclass(frozen=True)
class CostReport:
    """
    The three deployment-shape estimates computed for one run in one region.
    """

    region: "AwsRegion"
    lambda_cost: LambdaCost
    fargate_cost: FargateCost
    eks_cost: EksCost
