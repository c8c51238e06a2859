"""Tests for the FastAPI endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient

from evmexplorer.api.app import create_app
from evmexplorer.config import SearchMode
from evmexplorer.search.engine import UnifiedExplorer, get_explorer

from conftest import USDT_ETH


class RecordingDiscovery:
    def __init__(self):
        self.queries = []

    async def discover(self, query, chains, resolve_token):
        self.queries.append(query)
        return []


@pytest.fixture
def discovery():
    return RecordingDiscovery()


@pytest.fixture
def test_app(test_chains, fake_clients, settings, token_lists, discovery):
    """Create test application backed by fake chains."""
    explorer = UnifiedExplorer(
        chains=test_chains,
        clients=fake_clients,
        discovery=discovery,
        settings=settings,
        mode=SearchMode.CURATED,
        token_lists=token_lists,
    )
    app = create_app()
    app.dependency_overrides[get_explorer] = lambda: explorer
    return app


@pytest.fixture
async def client(test_app):
    """Create async test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    @pytest.mark.asyncio
    async def test_health_check(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "evm-explorer"}

    @pytest.mark.asyncio
    async def test_detailed_health(self, client):
        response = await client.get("/health/detailed")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["search_mode"] == "curated"
        assert data["config"]["environment"] == "test"
        assert [c["chain_id"] for c in data["chains"]] == [1, 56, 137]
        assert data["chains"][0]["curated_tokens"] == 3

    @pytest.mark.asyncio
    async def test_detailed_health_degraded_without_client(self, client, test_app):
        explorer = test_app.dependency_overrides[get_explorer]()
        del explorer.clients[56]

        response = await client.get("/health/detailed")

        data = response.json()
        assert data["status"] == "degraded"
        assert [c["has_client"] for c in data["chains"]] == [True, False, True]


class TestChainEndpoints:
    """Tests for chain endpoints."""

    @pytest.mark.asyncio
    async def test_list_chains(self, client):
        response = await client.get("/api/v1/chains")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert [c["chain_id"] for c in data["chains"]] == [1, 56, 137]
        assert data["chains"][0]["native_currency"]["symbol"] == "ETH"

    @pytest.mark.asyncio
    async def test_get_chain(self, client):
        response = await client.get("/api/v1/chains/56")

        assert response.status_code == 200
        assert response.json()["name"] == "BNB Smart Chain"

    @pytest.mark.asyncio
    async def test_unknown_chain(self, client):
        response = await client.get("/api/v1/chains/8453")

        assert response.status_code == 404


class TestSearchEndpoints:
    """Tests for search endpoints."""

    @pytest.mark.asyncio
    async def test_smart_search_address(self, client):
        response = await client.get("/api/v1/search", params={"q": USDT_ETH})

        assert response.status_code == 200
        data = response.json()
        assert data["found"] is True
        assert data["search_type"] == "address"
        assert data["results"][0]["token_info"]["symbol"] == "USDT"
        assert data["results"][0]["balance"] == "1.0"

    @pytest.mark.asyncio
    async def test_smart_search_curated(self, client):
        response = await client.get("/api/v1/search", params={"q": "USDT"})

        data = response.json()
        assert data["search_type"] == "token-name-or-symbol"
        assert [r["chain_id"] for r in data["results"]] == [1, 56, 137]

    @pytest.mark.asyncio
    async def test_smart_search_mode_override(self, client, discovery):
        response = await client.get("/api/v1/search", params={"q": "tether", "mode": "external"})

        assert response.status_code == 200
        assert response.json()["found"] is False
        assert discovery.queries == ["tether"]

    @pytest.mark.asyncio
    async def test_smart_search_requires_query(self, client):
        response = await client.get("/api/v1/search")

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_invalid_address(self, client):
        response = await client.get("/api/v1/search/address/0x1234")

        assert response.status_code == 200
        assert response.json() == {
            "found": False,
            "results": [],
            "search_term": "0x1234",
            "search_type": "address",
        }

    @pytest.mark.asyncio
    async def test_symbol_search(self, client):
        response = await client.get("/api/v1/search/symbol/usdt")

        data = response.json()
        assert data["search_type"] == "token-symbol"
        assert len(data["results"]) == 3

    @pytest.mark.asyncio
    async def test_name_search(self, client):
        response = await client.get("/api/v1/search/name/coin")

        data = response.json()
        assert data["search_type"] == "token-name"
        assert [r["token_info"]["symbol"] for r in data["results"]] == ["USDC", "DAI"]
