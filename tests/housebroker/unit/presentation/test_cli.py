"""Tests for the housebroker command line interface."""

import asyncio
from unittest.mock import patch

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool
from typer.testing import CliRunner

from housebroker.infrastructure.persistence.sqlalchemy.repositories import (
    CommissionRateRepositorySQLAlchemy,
)
from housebroker.presentation.cli.app import app

runner = CliRunner()


def _engine_factory(url: str):
    return lambda: create_async_engine(url, poolclass=NullPool)


async def _count_rates(url: str) -> int:
    engine = create_async_engine(url, poolclass=NullPool)
    try:
        async with AsyncSession(engine) as session:
            return await CommissionRateRepositorySQLAlchemy(session).count()
    finally:
        await engine.dispose()


class TestSecretsGenerate:
    def test_prints_both_secrets(self):
        result = runner.invoke(app, ["secrets", "generate"])

        assert result.exit_code == 0
        assert "JWT_SECRET_KEY=" in result.output
        assert "POSTGRES_PASSWORD=" in result.output

    def test_secrets_differ_between_runs(self):
        first = runner.invoke(app, ["secrets", "generate"]).output
        second = runner.invoke(app, ["secrets", "generate"]).output

        assert first != second


@pytest.mark.integration
class TestDbAndCommissionCommands:
    """db init and commission quote against a SQLite file."""

    def _invoke(self, url: str, args: list[str]):
        with patch(
            "housebroker.presentation.cli.app.get_engine",
            side_effect=_engine_factory(url),
        ):
            return runner.invoke(app, args)

    def test_init_without_seed_leaves_tiers_empty(self, tmp_path):
        url = f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}"

        result = self._invoke(url, ["db", "init"])

        assert result.exit_code == 0
        assert asyncio.run(_count_rates(url)) == 0

    def test_init_with_seed_rates(self, tmp_path):
        url = f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}"

        result = self._invoke(url, ["db", "init", "--seed-rates"])

        assert result.exit_code == 0
        assert asyncio.run(_count_rates(url)) == 3

    def test_quote(self, tmp_path):
        url = f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}"
        self._invoke(url, ["db", "init", "--seed-rates"])

        result = self._invoke(url, ["commission", "quote", "30000"])

        assert result.exit_code == 0
        assert "600.00" in result.output
        assert "Up to 50,000" in result.output

    def test_quote_negative_price_fails(self, tmp_path):
        url = f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}"
        self._invoke(url, ["db", "init", "--seed-rates"])

        result = self._invoke(url, ["commission", "quote", "--", "-10"])

        assert result.exit_code == 1

    def test_quote_without_tiers_fails(self, tmp_path):
        url = f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}"
        self._invoke(url, ["db", "init"])

        result = self._invoke(url, ["commission", "quote", "100"])

        assert result.exit_code == 1
        assert "No commission tier" in result.output
