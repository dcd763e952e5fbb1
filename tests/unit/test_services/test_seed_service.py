"""Unit tests for SeedService."""
from __future__ import annotations

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from kuma_seeder.models.monitor import Monitor
from kuma_seeder.schemas.definition import MonitorDefinition
from kuma_seeder.schemas.summary import SeedOutcome
from kuma_seeder.services.seed_service import SeedService
from kuma_seeder.utils.exceptions import SeedAbortedError, StorageError

BASE_URL = "http://x/"


def make_service(db: AsyncSession) -> SeedService:
    return SeedService(db, user_id=1, default_timeout=48.0)


async def all_monitors(db: AsyncSession) -> list[Monitor]:
    result = await db.execute(select(Monitor).order_by(Monitor.id))
    return list(result.scalars().all())


@pytest.mark.unit
async def test_seed_empty_database(test_db: AsyncSession, two_definitions) -> None:
    summary = await make_service(test_db).seed(two_definitions, BASE_URL)

    assert summary.inserted == 2
    assert summary.skipped == 0
    assert summary.total_monitors == 2
    assert [m.url for m in await all_monitors(test_db)] == [
        "http://x/always-up",
        "http://x/always-down",
    ]


@pytest.mark.unit
async def test_seed_twice_is_idempotent(test_db: AsyncSession, two_definitions) -> None:
    service = make_service(test_db)
    await service.seed(two_definitions, BASE_URL)
    first = [(m.id, m.url, m.name) for m in await all_monitors(test_db)]

    summary = await service.seed(two_definitions, BASE_URL)

    assert summary.inserted == 0
    assert summary.skipped == 2
    assert summary.total_monitors == 2
    assert all(r.outcome == SeedOutcome.SKIPPED for r in summary.results)
    assert [(m.id, m.url, m.name) for m in await all_monitors(test_db)] == first


@pytest.mark.unit
async def test_seed_reports_in_catalogue_order(test_db: AsyncSession, two_definitions) -> None:
    summary = await make_service(test_db).seed(two_definitions, BASE_URL)
    assert [r.name for r in summary.results] == ["Always Up", "Always Down"]
    assert all(r.monitor_id is not None for r in summary.results)


@pytest.mark.unit
async def test_seed_applies_fixed_defaults(test_db: AsyncSession, two_definitions) -> None:
    await make_service(test_db).seed(two_definitions, BASE_URL)
    monitor = (await all_monitors(test_db))[0]

    assert monitor.name == "Always Up"
    assert monitor.description == "Always returns 200 OK"
    assert monitor.active is True
    assert monitor.user_id == 1
    assert monitor.interval_seconds == 60
    assert monitor.monitor_type == "http"
    assert monitor.weight == 2000
    assert monitor.method == "GET"
    assert monitor.maxretries == 0
    assert monitor.maxredirects == 10
    assert monitor.accepted_statuscodes_json == '["200-299"]'
    assert monitor.dns_resolve_type == "A"
    assert monitor.dns_resolve_server is None
    assert monitor.packet_size == 56
    assert monitor.mqtt_check_type == "keyword"
    assert monitor.conditions == "[]"
    assert monitor.ping_per_request_timeout == 2


@pytest.mark.unit
async def test_seed_falls_back_to_default_timeout_and_null_keyword(test_db: AsyncSession) -> None:
    catalogue = [
        MonitorDefinition(name="Plain", path="/plain"),
        MonitorDefinition(name="Slow", path="/slow", timeout=10),
        MonitorDefinition(name="Keyword", path="/keyword", keyword="OPERATIONAL"),
    ]
    await make_service(test_db).seed(catalogue, BASE_URL)
    by_name = {m.name: m for m in await all_monitors(test_db)}

    assert by_name["Plain"].timeout == 48.0
    assert by_name["Plain"].keyword is None
    assert by_name["Slow"].timeout == 10
    assert by_name["Keyword"].keyword == "OPERATIONAL"
    assert by_name["Keyword"].timeout == 48.0


@pytest.mark.unit
async def test_seed_matches_only_exact_url(test_db: AsyncSession) -> None:
    test_db.add(Monitor(name="Near miss", url="http://x/always-up/"))
    await test_db.commit()

    summary = await make_service(test_db).seed(
        [MonitorDefinition(name="Always Up", path="/always-up")],
        BASE_URL,
    )
    assert summary.inserted == 1
    assert summary.total_monitors == 2


@pytest.mark.unit
async def test_seed_skips_existing_without_modifying_it(test_db: AsyncSession) -> None:
    existing = Monitor(name="Renamed by hand", url="http://x/always-up", timeout=99, active=False)
    test_db.add(existing)
    await test_db.commit()

    summary = await make_service(test_db).seed(
        [MonitorDefinition(name="Always Up", path="/always-up")],
        BASE_URL,
    )

    assert summary.skipped == 1
    assert summary.results[0].monitor_id == existing.id
    await test_db.refresh(existing)
    assert existing.name == "Renamed by hand"
    assert existing.timeout == 99
    assert existing.active is False


@pytest.mark.unit
async def test_total_includes_foreign_monitors(
    test_db: AsyncSession, foreign_monitor: Monitor, two_definitions
) -> None:
    summary = await make_service(test_db).seed(two_definitions, BASE_URL)
    assert summary.inserted == 2
    assert summary.total_monitors == 3


@pytest.mark.unit
async def test_seed_empty_catalogue(test_db: AsyncSession) -> None:
    summary = await make_service(test_db).seed([], BASE_URL)
    assert summary.inserted == 0
    assert summary.skipped == 0
    assert summary.total_monitors == 0


@pytest.mark.unit
async def test_find_monitor_id(test_db: AsyncSession, foreign_monitor: Monitor) -> None:
    service = make_service(test_db)
    assert await service.find_monitor_id("https://api.example.com/health") == foreign_monitor.id
    assert await service.find_monitor_id("https://api.example.com/other") is None


@pytest.mark.unit
async def test_insert_failure_aborts_and_keeps_earlier_rows(
    test_db: AsyncSession, two_definitions, monkeypatch
) -> None:
    service = make_service(test_db)
    real_build = service.build_monitor

    def failing_build(definition, url):
        if definition.name == "Always Down":
            raise OperationalError("INSERT INTO monitor", {}, Exception("database is locked"))
        return real_build(definition, url)

    monkeypatch.setattr(service, "build_monitor", failing_build)

    with pytest.raises(SeedAbortedError) as exc_info:
        await service.seed(two_definitions, BASE_URL)

    assert exc_info.value.definition == "Always Down"
    assert exc_info.value.inserted == ["Always Up"]
    assert exc_info.value.step == "seed"
    assert "database is locked" in exc_info.value.reason

    count = (await test_db.execute(select(func.count(Monitor.id)))).scalar()
    assert count == 1


@pytest.mark.unit
async def test_seed_aborted_is_a_storage_error(test_db: AsyncSession, two_definitions, monkeypatch) -> None:
    service = make_service(test_db)

    async def failing_lookup(url):
        raise OperationalError("SELECT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(service, "find_monitor_id", failing_lookup)

    with pytest.raises(StorageError):
        await service.seed(two_definitions, BASE_URL)
