# hingad/metrics.py

from prometheus_client import Counter

# Define Prometheus metrics

# Prayer Window Metrics
PRAYER_WINDOW_RESOLUTIONS_TOTAL = Counter('hingad_prayer_window_resolutions_total', 'Total current-prayer resolutions served', ['current_prayer'])

# Schedule Store Metrics
PRAYER_SCHEDULE_WRITES_TOTAL = Counter('hingad_prayer_schedule_writes_total', 'Total prayer schedule writes', ['status'])
MALFORMED_TIME_VALUES_TOTAL = Counter('hingad_malformed_time_values_total', 'Total clock values rejected as malformed', ['source'])
