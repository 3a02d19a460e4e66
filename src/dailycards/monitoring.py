"""Monitoring configuration for the flashcards service."""
from prometheus_client import Counter, Histogram, start_http_server

# Learning metrics
decks_served = Counter(
    "dailycards_decks_served_total",
    "Total number of daily decks returned",
)

cards_marked = Counter(
    "dailycards_cards_marked_total",
    "Total number of card status updates",
    ["status"],
)

profile_resets = Counter(
    "dailycards_profile_resets_total",
    "Total number of profile progress resets",
)

# Error metrics
storage_errors = Counter(
    "dailycards_storage_errors_total",
    "Total number of catalog or progress storage failures",
)

# Performance metrics
request_duration = Histogram(
    "dailycards_request_duration_seconds",
    "Duration of API requests in seconds",
    ["endpoint"],
    buckets=[0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
)


def start_monitoring(port: int = 9090) -> None:
    """Start the Prometheus metrics server."""
    start_http_server(port)
