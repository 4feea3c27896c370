"""
Cost estimation for Lambda, ECS Fargate and EKS Fargate.

Maps ExecutionMetrics onto the billing granularity of each deployment shape
and a region's unit prices. Everything here is deterministic and total:
any metrics record yields an estimate, nothing raises.

Fargate bills in discrete vCPU and memory increments, so usage is always
rounded up to the next billable tier, never down.
"""

import logging
import math
from typing import Dict, List, Tuple, Union

from ..models.costs import CostReport, EksCost, FargateCost, LambdaCost
from ..models.metrics import ExecutionMetrics
from .regions import AwsRegion, RegionPricing, get_region_pricing

logger = logging.getLogger(__name__)

HOURS_PER_MONTH = 730.0
MS_PER_HOUR = 3_600_000.0
EXECUTIONS_PER_MONTH = 1_000_000

# Lambda bills at least 128 MB, in whole megabytes.
LAMBDA_MIN_MEMORY_MB = 128.0

MIN_VCPU = 0.25
MIN_MEMORY_GB = 0.5

# (threshold, tier): the first threshold >= the desired vCPU selects the tier.
VCPU_TIERS: List[Tuple[float, float]] = [
    (0.25, 0.25),
    (0.5, 0.5),
    (1.0, 1.0),
    (2.0, 2.0),
    (4.0, 4.0),
    (8.0, 8.0),
]
LARGEST_VCPU_TIER = 16.0

MAX_MEMORY_GB_PER_VCPU: Dict[float, float] = {
    0.25: 2.0,
    0.5: 4.0,
    1.0: 8.0,
    2.0: 16.0,
    4.0: 30.0,
    8.0: 120.0,
    16.0: 120.0,
}


def select_vcpu_tier(cpu_avg: float) -> float:
    """
    Round the average CPU usage up to a Fargate vCPU tier.

    ``cpu_avg`` is a percentage where 100 means one fully busy core.
    Anything above 8 vCPU resolves to the 16 vCPU tier.
    """
    desired = max(cpu_avg / 100.0, MIN_VCPU)
    for threshold, tier in VCPU_TIERS:
        if desired <= threshold:
            return tier
    return LARGEST_VCPU_TIER


def select_memory_gb(memory_mb: float, vcpu: float) -> float:
    """
    Round peak memory up to whole GB, capped at the vCPU tier's maximum.
    """
    desired = max(memory_mb / 1024.0, MIN_MEMORY_GB)
    max_memory = MAX_MEMORY_GB_PER_VCPU.get(vcpu, MAX_MEMORY_GB_PER_VCPU[LARGEST_VCPU_TIER])
    return float(math.ceil(min(desired, max_memory)))


class CostEstimator:
    """
    Estimates per-execution and monthly costs of a run in one AWS region.
    """

    def __init__(self, region: Union[AwsRegion, str] = AwsRegion.US_EAST_1):
        self.region = AwsRegion.from_identifier(region)
        self.pricing: RegionPricing = get_region_pricing(self.region)

    def estimate_serverless(self, metrics: ExecutionMetrics) -> LambdaCost:
        """
        Lambda cost: GB-seconds at the billed memory size plus one request.

        The monthly figure extrapolates to one million executions.
        """
        memory_mb = math.ceil(max(metrics.memory_mb, LAMBDA_MIN_MEMORY_MB))
        duration_seconds = metrics.duration_ms / 1000.0
        gb_seconds = (memory_mb / 1024.0) * duration_seconds

        compute_cost = gb_seconds * self.pricing.lambda_gb_second
        request_cost = self.pricing.lambda_per_million_requests / EXECUTIONS_PER_MONTH

        cost_per_execution = compute_cost + request_cost
        return LambdaCost(
            cost_per_execution=cost_per_execution,
            monthly_cost_1m=cost_per_execution * EXECUTIONS_PER_MONTH,
        )

    def estimate_container(self, metrics: ExecutionMetrics) -> FargateCost:
        """
        ECS Fargate cost for the selected vCPU and memory tiers.

        The monthly figure assumes the task runs continuously for 730 hours,
        independent of the measured duration.
        """
        vcpu = select_vcpu_tier(metrics.cpu_avg)
        memory_gb = select_memory_gb(metrics.memory_mb, vcpu)
        hourly_rate = self._fargate_hourly_rate(vcpu, memory_gb)
        logger.debug(f"Fargate tier for {self.region.value}: {vcpu} vCPU / {memory_gb} GB")

        return FargateCost(
            cost_per_execution=hourly_rate * self._duration_hours(metrics),
            monthly_cost_continuous=hourly_rate * HOURS_PER_MONTH,
        )

    def estimate_managed_cluster(self, metrics: ExecutionMetrics) -> EksCost:
        """EKS Fargate cost: the Fargate figures plus the control plane fee."""
        fargate_cost = self.estimate_container(metrics)
        cluster_cost = self.pricing.eks_cluster_hour * self._duration_hours(metrics)

        return EksCost(
            cost_per_execution=fargate_cost.cost_per_execution + cluster_cost,
            monthly_cost_continuous=(
                fargate_cost.monthly_cost_continuous
                + self.pricing.eks_cluster_hour * HOURS_PER_MONTH
            ),
        )

    # Names of the AWS services each shape models.
    estimate_lambda = estimate_serverless
    estimate_ecs_fargate = estimate_container
    estimate_eks_fargate = estimate_managed_cluster

    def estimate_all(self, metrics: ExecutionMetrics) -> CostReport:
        return CostReport(
            region=self.region,
            lambda_cost=self.estimate_serverless(metrics),
            fargate_cost=self.estimate_container(metrics),
            eks_cost=self.estimate_managed_cluster(metrics),
        )

    def _fargate_hourly_rate(self, vcpu: float, memory_gb: float) -> float:
        return vcpu * self.pricing.fargate_vcpu_hour + memory_gb * self.pricing.fargate_gb_hour

    @staticmethod
    def _duration_hours(metrics: ExecutionMetrics) -> float:
        return metrics.duration_ms / MS_PER_HOUR
