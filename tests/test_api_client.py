"""
Data client tests using aioresponses for clean HTTP mocking
"""
import pytest
import aiohttp
from unittest.mock import MagicMock, patch
from aioresponses import aioresponses

from api.client import DataClient, get_data_client, get_global_client, cleanup_global_client
from exceptions import APIException


@pytest.fixture
def mock_config():
    """Mock configuration for testing."""
    config = MagicMock()
    config.data_base_url = "https://data.example.com/data"
    config.default_timeout = 10
    return config


class TestDataClientWithAioresponses:
    """Test data client with aioresponses for HTTP mocking."""

    @pytest.fixture
    def data_client(self, mock_config):
        """Create data client with mocked config."""
        with patch('api.client.get_config', return_value=mock_config):
            return DataClient()

    def test_build_url(self, data_client):
        """Test relative paths join the data root and full URLs pass through."""
        assert data_client._build_url("teams.json") == "https://data.example.com/data/teams.json"
        assert data_client._build_url("/seasons/2025_summary.json") == \
            "https://data.example.com/data/seasons/2025_summary.json"
        assert data_client._build_url("https://other.example.com/x.csv") == "https://other.example.com/x.csv"

    def test_requires_base_url(self, mock_config):
        mock_config.data_base_url = ""
        with patch('api.client.get_config', return_value=mock_config):
            with pytest.raises(ValueError, match="DATA_BASE_URL"):
                DataClient()

    @pytest.mark.asyncio
    async def test_get_json_success(self, data_client):
        """Test successful JSON fetch."""
        expected_data = {"teams": [{"id": "a", "name": "A"}]}

        with aioresponses() as m:
            m.get("https://data.example.com/data/teams.json", payload=expected_data, status=200)

            result = await data_client.get_json("teams.json")

            assert result == expected_data

        await data_client.close()

    @pytest.mark.asyncio
    async def test_get_json_404(self, data_client):
        """Test missing file carries its status."""
        with aioresponses() as m:
            m.get("https://data.example.com/data/seasons/1999_summary.json", status=404, body="Not Found")

            with pytest.raises(APIException, match="status 404") as exc_info:
                await data_client.get_json("seasons/1999_summary.json")

            assert exc_info.value.status == 404

        await data_client.close()

    @pytest.mark.asyncio
    async def test_get_json_invalid_body(self, data_client):
        """Test a non-JSON body is reported as an API error."""
        with aioresponses() as m:
            m.get("https://data.example.com/data/teams.json", status=200, body="<html>oops</html>")

            with pytest.raises(APIException, match="Invalid JSON"):
                await data_client.get_json("teams.json")

        await data_client.close()

    @pytest.mark.asyncio
    async def test_get_json_network_error(self, data_client):
        """Test connection failures become APIException without a status."""
        with aioresponses() as m:
            m.get("https://data.example.com/data/teams.json", exception=aiohttp.ClientConnectionError("refused"))

            with pytest.raises(APIException, match="Network error") as exc_info:
                await data_client.get_json("teams.json")

            assert exc_info.value.status is None

        await data_client.close()

    @pytest.mark.asyncio
    async def test_get_text_success(self, data_client):
        """Test fetching a CSV export from an absolute URL."""
        with aioresponses() as m:
            m.get("https://sheets.example.com/abc.csv", status=200, body='"a","b"\n"1","2"')

            result = await data_client.get_text("https://sheets.example.com/abc.csv")

            assert result == '"a","b"\n"1","2"'

        await data_client.close()

    @pytest.mark.asyncio
    async def test_get_text_server_error(self, data_client):
        with aioresponses() as m:
            m.get("https://sheets.example.com/abc.csv", status=500, body="Internal Server Error")

            with pytest.raises(APIException, match="status 500"):
                await data_client.get_text("https://sheets.example.com/abc.csv")

        await data_client.close()


class TestDataClientHelpers:
    """Test data client helper functions."""

    @pytest.mark.asyncio
    async def test_get_data_client_context_manager(self, mock_config):
        """Test get_data_client context manager."""
        with patch('api.client.get_config', return_value=mock_config):
            with aioresponses() as m:
                m.get("https://data.example.com/data/teams.json", payload={"teams": []}, status=200)

                async with get_data_client() as client:
                    assert isinstance(client, DataClient)
                    result = await client.get_json("teams.json")
                    assert result == {"teams": []}

                assert client._session.closed

    @pytest.mark.asyncio
    async def test_async_context_manager(self, mock_config):
        with patch('api.client.get_config', return_value=mock_config):
            async with DataClient() as client:
                assert client._session is not None
            assert client._session.closed

    @pytest.mark.asyncio
    async def test_global_client_management(self, mock_config):
        """Test global client getter and cleanup."""
        with patch('api.client.get_config', return_value=mock_config):
            client1 = await get_global_client()
            client2 = await get_global_client()

            # Should return same instance
            assert client1 is client2
            assert isinstance(client1, DataClient)

            await cleanup_global_client()

            # New client should be different instance
            client3 = await get_global_client()
            assert client3 is not client1

            # Clean up for other tests
            await cleanup_global_client()

    @pytest.mark.asyncio
    async def test_concurrent_requests(self, mock_config):
        """Test multiple concurrent fetches share one session."""
        import asyncio

        with patch('api.client.get_config', return_value=mock_config):
            with aioresponses() as m:
                for year in (2023, 2024, 2025):
                    m.get(
                        f"https://data.example.com/data/seasons/{year}_league.json",
                        payload={"year": year},
                        status=200
                    )

                client = DataClient()
                results = await asyncio.gather(*[
                    client.get_json(f"seasons/{year}_league.json") for year in (2023, 2024, 2025)
                ])

                assert [r["year"] for r in results] == [2023, 2024, 2025]
                await client.close()
