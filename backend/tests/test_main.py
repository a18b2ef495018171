import logging

import pytest

from advocate_directory import main


class TestLifespan:
    @pytest.mark.asyncio
    async def test_logging_is_configured_at_startup(self, monkeypatch, tmp_path):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        monkeypatch.setattr(main.settings, "database_path", tmp_path / "startup.sqlite")

        assert calls == []
        async with main.lifespan(main.app):
            assert calls == [{"level": main.settings.log_level.upper()}]

    @pytest.mark.asyncio
    async def test_startup_creates_the_schema(self, monkeypatch, tmp_path):
        db_path = tmp_path / "nested" / "startup.sqlite"
        monkeypatch.setattr(main.settings, "database_path", db_path)

        async with main.lifespan(main.app):
            assert db_path.exists()
