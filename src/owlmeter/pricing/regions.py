"""
AWS regional list prices used by the cost estimator.

The table is a snapshot of on-demand list pricing and needs periodic
manual updates. Keep it as plain data: bump PRICING_TABLE_VERSION and edit
the records below, the estimation formulas live in ``estimator``.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

from ..validation import ValidationError

PRICING_TABLE_VERSION = 1


class AwsRegion(Enum):
    """The regions with a pricing record, valued by their identifier."""

    US_EAST_1 = "us-east-1"
    US_WEST_2 = "us-west-2"
    EU_WEST_1 = "eu-west-1"
    AP_SOUTHEAST_1 = "ap-southeast-1"
    SA_EAST_1 = "sa-east-1"

    @property
    def display_name(self) -> str:
        return f"{self.value} ({_LOCATIONS[self]})"

    @classmethod
    def identifiers(cls) -> list:
        return [region.value for region in cls]

    @classmethod
    def from_identifier(cls, identifier: Union["AwsRegion", str]) -> "AwsRegion":
        """
        Resolve a region identifier such as ``"eu-west-1"``.

        Raises:
            ValidationError: If the identifier is not one of the known regions
        """
        if isinstance(identifier, cls):
            return identifier
        try:
            return cls(str(identifier).strip().lower())
        except ValueError:
            raise ValidationError(
                f"region must be one of {cls.identifiers()}, got {identifier}",
                field_name="region",
                value=identifier,
            )


_LOCATIONS = {
    AwsRegion.US_EAST_1: "N. Virginia",
    AwsRegion.US_WEST_2: "Oregon",
    AwsRegion.EU_WEST_1: "Ireland",
    AwsRegion.AP_SOUTHEAST_1: "Singapore",
    AwsRegion.SA_EAST_1: "São Paulo",
}


@dataclass(frozen=True)
class RegionPricing:
    """
    Unit prices for one region, in USD.
    """

    # Lambda compute, per GB-second.
    lambda_gb_second: float
    # Lambda requests, per million invocations.
    lambda_per_million_requests: float
    # Fargate, per vCPU-hour.
    fargate_vcpu_hour: float
    # Fargate, per GB of memory per hour.
    fargate_gb_hour: float
    # EKS control plane, per cluster-hour.
    eks_cluster_hour: float


REGION_PRICING: Mapping[AwsRegion, RegionPricing] = MappingProxyType({
    AwsRegion.US_EAST_1: RegionPricing(
        lambda_gb_second=0.0000166667,
        lambda_per_million_requests=0.20,
        fargate_vcpu_hour=0.04048,
        fargate_gb_hour=0.004445,
        eks_cluster_hour=0.10,
    ),
    AwsRegion.US_WEST_2: RegionPricing(
        lambda_gb_second=0.0000166667,
        lambda_per_million_requests=0.20,
        fargate_vcpu_hour=0.04048,
        fargate_gb_hour=0.004445,
        eks_cluster_hour=0.10,
    ),
    AwsRegion.EU_WEST_1: RegionPricing(
        lambda_gb_second=0.0000166667,
        lambda_per_million_requests=0.20,
        fargate_vcpu_hour=0.04456,
        fargate_gb_hour=0.004890,
        eks_cluster_hour=0.10,
    ),
    AwsRegion.AP_SOUTHEAST_1: RegionPricing(
        lambda_gb_second=0.0000166667,
        lambda_per_million_requests=0.20,
        fargate_vcpu_hour=0.04656,
        fargate_gb_hour=0.005107,
        eks_cluster_hour=0.10,
    ),
    AwsRegion.SA_EAST_1: RegionPricing(
        lambda_gb_second=0.0000208334,
        lambda_per_million_requests=0.30,
        fargate_vcpu_hour=0.05664,
        fargate_gb_hour=0.006218,
        eks_cluster_hour=0.10,
    ),
})


def get_region_pricing(region: Union[AwsRegion, str]) -> RegionPricing:
    """Return the pricing record for a region or region identifier."""
    return REGION_PRICING[AwsRegion.from_identifier(region)]
