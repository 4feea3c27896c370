"""
Human-readable and JSON rendering of a run's metrics and cost estimates.
"""

import dataclasses
from typing import Any, Dict

from ..models.costs import CostReport
from ..models.metrics import ExecutionMetrics
from ..pricing import PRICING_TABLE_VERSION

RULE = "━" * 40


def format_metrics(metrics: ExecutionMetrics) -> str:
    lines = [
        "COLLECTED METRICS",
        RULE,
        f"  Duration: {metrics.duration_ms} ms",
        f"  CPU average: {metrics.cpu_avg:.2f}%",
        f"  CPU peak: {metrics.cpu_peak:.2f}%",
        f"  Memory used: {metrics.memory_mb:.2f} MB",
        f"  Bytes sent: {metrics.network_sent} bytes",
        f"  Bytes received: {metrics.network_received} bytes",
    ]
    return "\n".join(lines)


def format_cost_report(report: CostReport) -> str:
    lines = [
        f"AWS COST ESTIMATE ({report.region.display_name})",
        RULE,
        "AWS Lambda:",
        f"   • Cost per execution: ${report.lambda_cost.cost_per_execution:.6f}",
        f"   • Monthly cost (1M executions): ${report.lambda_cost.monthly_cost_1m:.2f}",
        "",
        "ECS Fargate:",
        f"   • Cost per execution: ${report.fargate_cost.cost_per_execution:.6f}",
        f"   • Monthly cost (continuous): ${report.fargate_cost.monthly_cost_continuous:.2f}",
        "",
        "EKS Fargate:",
        f"   • Cost per execution: ${report.eks_cost.cost_per_execution:.6f}",
        f"   • Monthly cost (continuous): ${report.eks_cost.monthly_cost_continuous:.2f}",
    ]
    return "\n".join(lines)


def format_text_report(metrics: ExecutionMetrics, report: CostReport) -> str:
    return "\n\n".join([format_metrics(metrics), format_cost_report(report)]) + "\n"


def report_to_dict(metrics: ExecutionMetrics, report: CostReport) -> Dict[str, Any]:
    """
    Build a JSON-serializable view of a run.
    """
    return {
        "metrics": dataclasses.asdict(metrics),
        "costs": {
            "region": report.region.value,
            "pricing_table_version": PRICING_TABLE_VERSION,
            "lambda": dataclasses.asdict(report.lambda_cost),
            "ecs_fargate": dataclasses.asdict(report.fargate_cost),
            "eks_fargate": dataclasses.asdict(report.eks_cost),
        },
    }
