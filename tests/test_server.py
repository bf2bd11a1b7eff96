"""Tests for the MCP server wiring."""

from unittest.mock import MagicMock, patch

import pytest

from steam_webapi.endpoints import ENDPOINT_CLASSES, EndpointManager
from steam_webapi.server import SERVER_NAME, create_server, run_server


class TestCreateServer:
    def test_server_is_named(self):
        server = create_server(EndpointManager(MagicMock(), ENDPOINT_CLASSES))

        assert server.name == SERVER_NAME


class TestRunServer:
    @pytest.mark.asyncio
    async def test_exits_without_api_key(self):
        with patch("steam_webapi.client.steam_client.load_dotenv"), patch.dict(
            "os.environ", {}, clear=True
        ):
            with pytest.raises(SystemExit) as exc_info:
                await run_server()

        assert exc_info.value.code == 1
