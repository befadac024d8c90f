from prometheus_client import Counter, Histogram, Gauge, REGISTRY


# we check if they are already registered to avoid errors during hot reloads or test runs
def get_or_create_metric(name, documentation, metric_type, **kwargs):
    try:
        return metric_type(name, documentation, **kwargs)
    except ValueError:
        # If it already exists, retrieve it from the registry
        return REGISTRY._names_to_collectors[name]


REQUESTS_TOTAL = get_or_create_metric(
    "genie_requests_total",
    "Total requests",
    Counter,
    labelnames=["endpoint", "status"],
)

REQUEST_LATENCY_SECONDS = get_or_create_metric(
    "genie_request_latency_seconds",
    "Request latency",
    Histogram,
    labelnames=["endpoint"],
)

ENTRIES_CLASSIFIED_TOTAL = get_or_create_metric(
    "genie_entries_classified_total",
    "Entries produced by the capture pipeline, by type",
    Counter,
    labelnames=["type"],
)

STORE_ENTRIES = get_or_create_metric(
    "genie_store_entries", "Entries currently held by the store", Gauge
)
