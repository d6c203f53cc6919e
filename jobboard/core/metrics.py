"""Prometheus metrics for the Job Board API.

Metrics are exposed at the /metrics endpoint.

Metrics Categories:
- HTTP request metrics (latency, count, in progress)
- Job role listing metrics (filtered queries served)
- Status sweep metrics (runs by trigger and outcome, job roles closed)
"""

from prometheus_client import Counter, Gauge, Histogram, Info

APP_INFO = Info("jobboard_app", "Job Board application information")

HTTP_REQUESTS_TOTAL = Counter(
    "jobboard_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "jobboard_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

HTTP_REQUESTS_IN_PROGRESS = Gauge(
    "jobboard_http_requests_in_progress",
    "Number of HTTP requests currently in progress",
    ["method", "endpoint"],
)

JOB_ROLE_QUERIES_TOTAL = Counter(
    "jobboard_job_role_queries_total",
    "Filtered job role listing queries served",
    ["filtered"],  # yes, no
)

STATUS_SWEEP_RUNS_TOTAL = Counter(
    "jobboard_status_sweep_runs_total",
    "Status sweep invocations",
    ["trigger", "status"],  # trigger: scheduled, manual, celery; status: success, failure
)

JOB_ROLES_CLOSED_TOTAL = Counter(
    "jobboard_job_roles_closed_total",
    "Job roles moved from open to closed by the status sweep",
)

SCHEDULER_RUNNING = Gauge(
    "jobboard_scheduler_running",
    "1 while the in-process job status scheduler is running",
)


def set_app_info(version: str, environment: str) -> None:
    APP_INFO.info({"version": version, "environment": environment})


def record_job_role_query(filtered: bool) -> None:
    JOB_ROLE_QUERIES_TOTAL.labels(filtered="yes" if filtered else "no").inc()


def record_sweep(trigger: str, success: bool, closed: int = 0) -> None:
    """Record one sweep invocation and the number of job roles it closed."""
    STATUS_SWEEP_RUNS_TOTAL.labels(
        trigger=trigger, status="success" if success else "failure"
    ).inc()
    if closed:
        JOB_ROLES_CLOSED_TOTAL.inc(closed)


def set_scheduler_running(running: bool) -> None:
    SCHEDULER_RUNNING.set(1 if running else 0)
