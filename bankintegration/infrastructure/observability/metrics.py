"""Prometheus metrics for report fetches"""

from pathlib import Path

from prometheus_client import REGISTRY, Counter, Histogram, write_to_textfile

# Report API metrics
report_fetch_counter = Counter(
    "bankintegration_report_fetch_total",
    "Report API calls by outcome",
    ["outcome"],  # success | http_error | network_error
)

report_fetch_latency_histogram = Histogram(
    "bankintegration_report_fetch_latency_seconds",
    "Report API response time",
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)


def record_fetch(outcome: str) -> None:
    report_fetch_counter.labels(outcome=outcome).inc()


def write_metrics_textfile(path: Path) -> None:
    """Dump the registry for the node_exporter textfile collector (batch runs have no /metrics endpoint)"""
    path.parent.mkdir(parents=True, exist_ok=True)
    write_to_textfile(str(path), REGISTRY)
