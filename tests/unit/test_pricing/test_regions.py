"""
Unit tests for the regional pricing table.
"""

import dataclasses

import pytest

from owlmeter.pricing import AwsRegion, REGION_PRICING, get_region_pricing
from owlmeter.validation import ValidationError


@pytest.mark.unit
class TestRegionPricingTable:
    """Test cases for REGION_PRICING and region lookup."""

    def test_every_region_has_pricing(self):
        """Test that every region has a pricing record."""
        assert set(REGION_PRICING) == set(AwsRegion)
        assert len(REGION_PRICING) == 5

    def test_table_is_read_only(self):
        """Test that the pricing table is read-only."""
        with pytest.raises(TypeError):
            REGION_PRICING[AwsRegion.US_EAST_1] = None

    def test_records_are_frozen(self):
        """Test that pricing records are immutable."""
        pricing = REGION_PRICING[AwsRegion.US_EAST_1]
        with pytest.raises(dataclasses.FrozenInstanceError):
            pricing.eks_cluster_hour = 0.0

    def test_cluster_hour_is_uniform(self):
        """Test that the EKS cluster fee is uniform."""
        assert {p.eks_cluster_hour for p in REGION_PRICING.values()} == {0.10}

    def test_sa_east_1_has_distinct_lambda_prices(self):
        """Test sa-east-1 Lambda prices against other regions."""
        sao_paulo = REGION_PRICING[AwsRegion.SA_EAST_1]
        others = [p for r, p in REGION_PRICING.items() if r is not AwsRegion.SA_EAST_1]
        assert all(sao_paulo.lambda_gb_second > p.lambda_gb_second for p in others)
        assert all(sao_paulo.lambda_per_million_requests > p.lambda_per_million_requests for p in others)

    def test_lookup_by_identifier(self):
        """Test lookup by region identifier."""
        assert get_region_pricing("us-west-2") is REGION_PRICING[AwsRegion.US_WEST_2]
        assert get_region_pricing(" EU-WEST-1 ") is REGION_PRICING[AwsRegion.EU_WEST_1]

    def test_unknown_region(self):
        """Test rejection of unknown regions."""
        with pytest.raises(ValidationError) as exc_info:
            get_region_pricing("mars-north-1")

        assert exc_info.value.field_name == "region"
        assert "mars-north-1" in str(exc_info.value)

    def test_display_name(self):
        """Test human-readable region names."""
        assert AwsRegion.US_EAST_1.display_name == "us-east-1 (N. Virginia)"
        assert AwsRegion.SA_EAST_1.display_name == "sa-east-1 (São Paulo)"
