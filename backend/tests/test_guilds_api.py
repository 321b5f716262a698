"""
Tests for guild and channel browsing.

Run with: pytest tests/test_guilds_api.py -v
"""

import uuid

API = "/api"


class TestListGuilds:
    def test_list_guilds(self, client, online_bot):
        res = client.get(f"{API}/bots/{online_bot}/guilds")

        assert res.status_code == 200
        assert res.json() == [
            {"id": "g-1", "name": "Test Guild", "icon": "abc123", "memberCount": 42}
        ]

    def test_offline_bot(self, client, create_bot):
        bot = create_bot()

        res = client.get(f"{API}/bots/{bot['id']}/guilds")

        assert res.status_code == 400
        assert res.json() == {"error": "Bot not connected", "kind": "NotConnected"}

    def test_unknown_bot(self, client):
        res = client.get(f"{API}/bots/{uuid.uuid4()}/guilds")
        assert res.status_code == 404

    def test_upstream_failure(self, client, gateway, online_bot):
        gateway.last_handle.failure = RuntimeError("discord is down")

        res = client.get(f"{API}/bots/{online_bot}/guilds")

        assert res.status_code == 502
        assert res.json()["kind"] == "UpstreamError"

    def test_upstream_failure_keeps_bot_online(self, client, gateway, online_bot):
        gateway.last_handle.failure = RuntimeError("discord is down")
        client.get(f"{API}/bots/{online_bot}/guilds")

        bots = client.get(f"{API}/bots").json()
        assert bots[0]["connectionState"] == "online"

    def test_after_remote_drop(self, client, gateway, online_bot):
        client.portal.call(gateway.last_handle.drop)

        res = client.get(f"{API}/bots/{online_bot}/guilds")

        assert res.status_code == 400
        assert res.json()["kind"] == "NotConnected"


class TestListChannels:
    """Test text channel listing."""

    def test_only_text_channels_in_position_order(self, client, online_bot):
        res = client.get(f"{API}/bots/{online_bot}/guilds/g-1/channels")

        assert res.status_code == 200
        channels = res.json()
        # equal positions keep the order Discord returned them in
        assert [c["id"] for c in channels] == ["c-alpha", "c-general", "c-random", "c-readonly"]
        assert all(c["kind"] == "text" for c in channels)

    def test_channel_fields(self, client, online_bot):
        channels = client.get(f"{API}/bots/{online_bot}/guilds/g-1/channels").json()

        assert channels[0] == {
            "id": "c-alpha",
            "name": "alpha",
            "kind": "text",
            "parentId": "c-cat",
            "position": 0,
        }

    def test_unknown_guild(self, client, online_bot):
        res = client.get(f"{API}/bots/{online_bot}/guilds/g-404/channels")

        assert res.status_code == 404
        assert res.json()["kind"] == "NotFound"

    def test_offline_bot(self, client, create_bot):
        bot = create_bot()

        res = client.get(f"{API}/bots/{bot['id']}/guilds/g-1/channels")

        assert res.status_code == 400
