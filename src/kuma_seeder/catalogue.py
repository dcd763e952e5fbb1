"""Monitor definitions for the mock server endpoints."""
from __future__ import annotations

from typing import Iterable

from kuma_seeder.schemas.definition import MonitorDefinition
from kuma_seeder.utils.exceptions import DuplicateDefinitionError

MONITOR_CATALOGUE: tuple[MonitorDefinition, ...] = (
    # Always states
    MonitorDefinition(name="Always Up", path="/always-up", description="Always returns 200 OK"),
    MonitorDefinition(name="Always Down", path="/always-down", description="Always returns 500 error"),
    # Failure patterns
    MonitorDefinition(
        name="Random Failures (20%)",
        path="/random-failures",
        description="20% chance of failure",
    ),
    MonitorDefinition(
        name="Frequent Failures (50%)",
        path="/frequent-failures",
        description="50% chance of failure",
    ),
    MonitorDefinition(
        name="Intermittent (Every 3rd)",
        path="/intermittent",
        description="Fails every 3rd request",
    ),
    MonitorDefinition(name="Flapping", path="/flapping", description="Alternates between up and down"),
    # Timing issues
    MonitorDefinition(
        name="Slow Response",
        path="/slow-response",
        description="2-5 second delay",
        timeout=10,
    ),
    MonitorDefinition(
        name="Very Slow",
        path="/very-slow",
        description="10-15 second delay (may timeout)",
        timeout=20,
    ),
    MonitorDefinition(
        name="Timeout Simulation",
        path="/timeout",
        description="Never responds (tests timeout handling)",
        timeout=5,
    ),
    MonitorDefinition(
        name="Memory Leak Sim",
        path="/memory-leak",
        description="Gets slower with each request",
    ),
    # Status variations
    MonitorDefinition(
        name="Degraded Status",
        path="/degraded",
        description="Returns 200 with degraded status",
    ),
    MonitorDefinition(
        name="Maintenance Mode",
        path="/maintenance",
        description="Returns 503 maintenance mode",
    ),
    MonitorDefinition(
        name="Scheduled Downtime",
        path="/scheduled-down",
        description="Down during minutes 0-5 and 30-35",
    ),
    MonitorDefinition(
        name="Partial Outage",
        path="/partial-outage",
        description="Random partial service outage",
    ),
    MonitorDefinition(name="Rate Limited", path="/rate-limited", description="Returns 429 after 10 req/min"),
    # Health checks
    MonitorDefinition(name="Health Check", path="/health", description="Detailed health check response"),
    MonitorDefinition(name="Ping", path="/ping", description="Simple ping/pong"),
    MonitorDefinition(
        name="Keyword Check",
        path="/keyword-check",
        description="JSON with monitorable keywords",
        keyword="OPERATIONAL",
    ),
    MonitorDefinition(name="HTML Status", path="/html-status", description="HTML page with status"),
    MonitorDefinition(name="Cert Check", path="/cert-check", description="Certificate expiry simulation"),
    # Docker simulation
    MonitorDefinition(
        name="Docker Healthy",
        path="/docker/healthy",
        description="Healthy container status",
    ),
    MonitorDefinition(
        name="Docker Unhealthy",
        path="/docker/unhealthy",
        description="Unhealthy container status",
    ),
)


def validate_catalogue(catalogue: Iterable[MonitorDefinition]) -> None:
    """
    Reject catalogues where two definitions share a path or a name.

    A repeated path maps two definitions onto one URL, so the second would
    always be reported as skipped.

    Raises:
        DuplicateDefinitionError: On the first repeated path or name
    """
    seen_paths: set[str] = set()
    seen_names: set[str] = set()
    for definition in catalogue:
        if definition.path in seen_paths:
            raise DuplicateDefinitionError("path", definition.path)
        if definition.name in seen_names:
            raise DuplicateDefinitionError("name", definition.name)
        seen_paths.add(definition.path)
        seen_names.add(definition.name)
