from __future__ import annotations

from typing import Any

from sqlalchemy import Boolean, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from kuma_seeder.models.base import Base

# Values written identically to every seeded row.
SEEDED_MONITOR_DEFAULTS: dict[str, Any] = {
    "active": True,
    "interval_seconds": 60,
    "monitor_type": "http",
    "weight": 2000,
    "method": "GET",
    "maxretries": 0,
    "ignore_tls": False,
    "upside_down": False,
    "maxredirects": 10,
    "accepted_statuscodes_json": '["200-299"]',
    "dns_resolve_type": "A",
    "dns_resolve_server": None,
    "retry_interval": 0,
    "http_body_encoding": None,
    "resend_interval": 0,
    "packet_size": 56,
    "gamedig_given_port_only": True,
    "kafka_producer_ssl": False,
    "kafka_producer_allow_auto_topic_creation": False,
    "mqtt_check_type": "keyword",
    "json_path_operator": None,
    "cache_bust": False,
    "conditions": "[]",
    "ping_count": 1,
    "ping_numeric": True,
    "ping_per_request_timeout": 2,
}


class Monitor(Base):
    """
    Row of the Uptime Kuma ``monitor`` table.

    The table is owned by Uptime Kuma; only the columns the seeder writes
    are mapped here. Nothing in the schema makes ``url`` unique.
    """

    __tablename__ = "monitor"

    # Primary key
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    # Monitor details
    name: Mapped[str | None] = mapped_column(String(150))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    url: Mapped[str | None] = mapped_column(Text, nullable=True)
    monitor_type: Mapped[str | None] = mapped_column("type", String(20))
    keyword: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Ownership and scheduling
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    user_id: Mapped[int | None] = mapped_column(Integer)
    interval_seconds: Mapped[int] = mapped_column("interval", Integer, default=20, nullable=False)
    weight: Mapped[int] = mapped_column(Integer, default=2000)
    timeout: Mapped[float] = mapped_column(Float, default=0, nullable=False)

    # HTTP behaviour
    method: Mapped[str] = mapped_column(Text, default="GET", nullable=False)
    maxretries: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    retry_interval: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    resend_interval: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    ignore_tls: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    upside_down: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    maxredirects: Mapped[int] = mapped_column(Integer, default=10, nullable=False)
    accepted_statuscodes_json: Mapped[str] = mapped_column(
        Text,
        default='["200-299"]',
        nullable=False,
    )
    http_body_encoding: Mapped[str | None] = mapped_column(String(25), nullable=True)
    cache_bust: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    json_path_operator: Mapped[str | None] = mapped_column(String(10), nullable=True)
    conditions: Mapped[str] = mapped_column(Text, default="[]", nullable=False)

    # DNS / ping
    dns_resolve_type: Mapped[str | None] = mapped_column(String(5))
    dns_resolve_server: Mapped[str | None] = mapped_column(String(255), nullable=True)
    packet_size: Mapped[int] = mapped_column(Integer, default=56)
    ping_count: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    ping_numeric: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    ping_per_request_timeout: Mapped[int] = mapped_column(Integer, default=2, nullable=False)

    # Other protocol defaults
    gamedig_given_port_only: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    kafka_producer_ssl: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    kafka_producer_allow_auto_topic_creation: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )
    mqtt_check_type: Mapped[str] = mapped_column(String(255), default="keyword", nullable=False)

    def __repr__(self) -> str:
        return f"<Monitor(id={self.id}, name='{self.name}', url='{self.url}')>"
