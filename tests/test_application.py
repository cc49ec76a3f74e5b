"""Tests for Application."""

import pytest

from intracom.app import Application
from intracom.storage import FileBlobStore, SqliteBlobStore


class TestApplicationStart:
    """Tests for Application.start()."""

    @pytest.mark.asyncio
    async def test_start_initializes_components(self):
        """Test that start initializes all components."""
        app = Application(storage_path=":memory:")
        await app.start()

        assert isinstance(app._blob_store, SqliteBlobStore)
        assert app._state_store is not None
        assert app._gate is not None
        assert app._registry is not None
        assert app._mailbox is not None
        assert app._dispatcher is not None

        await app.stop()

    @pytest.mark.asyncio
    async def test_components_share_state_store(self):
        """Test that every component borrows the same state store."""
        app = Application(storage_path=":memory:")
        await app.start()

        store = app._state_store
        assert app._gate._state_store is store
        assert app._registry._state_store is store
        assert app._mailbox._state_store is store
        assert app._dispatcher._state_store is store

        await app.stop()

    @pytest.mark.asyncio
    async def test_not_started(self):
        """Test that accessing components before start raises."""
        app = Application(storage_path=":memory:")
        with pytest.raises(RuntimeError, match="not started"):
            app.dispatcher

    @pytest.mark.asyncio
    async def test_json_storage_selected(self, tmp_path):
        """Test that a .json location uses the file backend."""
        app = Application(storage_path=tmp_path / "bus.json")
        await app.start()
        assert isinstance(app._blob_store, FileBlobStore)
        await app.stop()

    @pytest.mark.asyncio
    async def test_env_storage(self, tmp_path, monkeypatch):
        """Test that INTRACOM_STORAGE picks the location."""
        monkeypatch.setenv("INTRACOM_STORAGE", str(tmp_path / "env.json"))
        app = Application()
        await app.start()
        await app.call_tool(
            "agent_register", {"agentId": "neo", "capabilities": {}, "allowlist": []}
        )
        await app.stop()

        assert (tmp_path / "env.json").exists()


class TestApplicationRestart:
    """Tests for state surviving a restart."""

    @pytest.mark.asyncio
    async def test_state_survives_restart(self, tmp_path):
        """Test that agents and mailboxes are reloaded on start."""
        path = tmp_path / "intracom-state.json"

        app = Application(storage_path=path)
        await app.start()
        await app.call_tool(
            "agent_register", {"agentId": "neo", "capabilities": {}, "allowlist": ["trinity"]}
        )
        await app.call_tool(
            "agent_register",
            {"agentId": "trinity", "capabilities": {}, "allowlist": [], "token": "t1"},
        )
        await app.call_tool("message_send", {"from": "neo", "to": "trinity", "body": "hi"})
        await app.stop()

        restarted = Application(storage_path=path)
        await restarted.start()

        agents = await restarted.call_tool("agent_list")
        assert [a["agentId"] for a in agents.data] == ["neo", "trinity"]

        denied = await restarted.call_tool("message_read", {"agentId": "trinity"})
        assert denied.is_error

        result = await restarted.call_tool(
            "message_read", {"agentId": "trinity", "token": "t1"}
        )
        assert [m["body"] for m in result.data["messages"]] == ["hi"]
        await restarted.stop()

    @pytest.mark.asyncio
    async def test_corrupt_storage_starts_empty(self, tmp_path):
        """Test that unparsable storage does not stop startup."""
        path = tmp_path / "intracom-state.json"
        path.write_text("{{{ definitely not json", encoding="utf-8")

        app = Application(storage_path=path)
        await app.start()
        result = await app.call_tool("agent_list")
        assert result.data == []
        await app.stop()
