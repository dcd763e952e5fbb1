"""Setup file for kuma-monitor-seeder package."""
from __future__ import annotations

from setuptools import find_packages, setup

setup(
    name="kuma-monitor-seeder",
    version="1.0.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.5.3",
        "pydantic-settings>=2.1.0",
        "sqlalchemy[asyncio]>=2.0.25",
        "aiosqlite>=0.19.0",
        "structlog>=24.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "kuma-seed=kuma_seeder.cli:main",
        ],
    },
)
