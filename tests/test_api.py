"""REST API endpoint tests."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from grid_snake.server.app import create_app
from grid_snake.server.session_manager import SessionManager

BASE = "http://test"


@pytest.fixture()
def app():
    application = create_app()
    application.state.session_manager = SessionManager()
    return application


@pytest.fixture()
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url=BASE) as c:
        yield c


async def _create(client, **body) -> str:
    resp = await client.post("/games", json=body)
    assert resp.status_code == 201
    return resp.json()["game_id"]


class TestCreateGame:
    @pytest.mark.asyncio
    async def test_create_default(self, client):
        resp = await client.post("/games", json={})
        assert resp.status_code == 201
        data = resp.json()
        assert data["status"] == "idle"
        assert data["score"] == 0
        assert data["grid_size"] == 20
        assert data["tick_ms"] == 220
        assert "game_id" in data

    @pytest.mark.asyncio
    async def test_create_custom_progression(self, client):
        resp = await client.post(
            "/games", json={"base_grid_size": 12, "base_tick_ms": 300},
        )
        assert resp.status_code == 201
        data = resp.json()
        assert data["grid_size"] == 12
        assert data["tick_ms"] == 300

    @pytest.mark.asyncio
    async def test_grid_below_minimum_rejected(self, client):
        resp = await client.post("/games", json={"base_grid_size": 3})
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_inconsistent_config_rejected(self, client):
        resp = await client.post(
            "/games", json={"base_grid_size": 30, "max_grid_size": 20},
        )
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_seed_reported_in_summary(self, client):
        resp = await client.post("/games", json={"seed": 42})
        assert resp.json()["seed"] == 42
        listed = (await client.get("/games")).json()
        assert listed[0]["seed"] == 42
        resp = await client.post("/games", json={})
        assert resp.json()["seed"] is None

    @pytest.mark.asyncio
    async def test_seeded_games_match(self, client):
        a = await _create(client, seed=5)
        b = await _create(client, seed=5)
        food_a = (await client.get(f"/games/{a}")).json()["state"]["food"]
        food_b = (await client.get(f"/games/{b}")).json()["state"]["food"]
        assert food_a == food_b


class TestListGames:
    @pytest.mark.asyncio
    async def test_list_empty(self, client):
        resp = await client.get("/games")
        assert resp.status_code == 200
        assert resp.json() == []

    @pytest.mark.asyncio
    async def test_list_after_create(self, client):
        game_id = await _create(client)
        resp = await client.get("/games")
        assert [g["game_id"] for g in resp.json()] == [game_id]


class TestGameplay:
    @pytest.mark.asyncio
    async def test_get_snapshot(self, client):
        game_id = await _create(client, seed=1)
        resp = await client.get(f"/games/{game_id}")
        assert resp.status_code == 200
        data = resp.json()
        assert data["game_id"] == game_id
        assert data["state"]["gridSize"] == 20
        assert data["state"]["snake"][0] == {"x": 10, "y": 10}
        assert data["hud"]["board_size"] == "20x20"

    @pytest.mark.asyncio
    async def test_unknown_game_404(self, client):
        assert (await client.get("/games/nope")).status_code == 404
        assert (await client.post("/games/nope/step")).status_code == 404
        resp = await client.post(
            "/games/nope/direction", json={"direction": "up"},
        )
        assert resp.status_code == 404

    @pytest.mark.asyncio
    async def test_direction_then_step(self, client):
        game_id = await _create(client, seed=1)
        resp = await client.post(
            f"/games/{game_id}/direction", json={"direction": "up"},
        )
        assert resp.status_code == 200
        resp = await client.post(f"/games/{game_id}/step")
        data = resp.json()
        assert data["ticks_run"] == 1
        assert data["state"]["status"] == "running"
        assert data["state"]["direction"] == "up"
        assert data["state"]["snake"][0] == {"x": 10, "y": 9}

    @pytest.mark.asyncio
    async def test_unknown_direction_ignored(self, client):
        game_id = await _create(client, seed=1)
        resp = await client.post(
            f"/games/{game_id}/direction", json={"direction": "north"},
        )
        assert resp.status_code == 200
        resp = await client.post(f"/games/{game_id}/step")
        assert resp.json()["state"]["direction"] == "right"

    @pytest.mark.asyncio
    async def test_empty_direction_invalid(self, client):
        game_id = await _create(client)
        resp = await client.post(
            f"/games/{game_id}/direction", json={"direction": ""},
        )
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_advance(self, client):
        game_id = await _create(client, seed=1)
        resp = await client.post(f"/games/{game_id}/advance", json={"ms": 450})
        data = resp.json()
        assert data["ticks_run"] == 2
        assert data["state"]["snake"][0] == {"x": 12, "y": 10}

    @pytest.mark.asyncio
    async def test_advance_bounds(self, client):
        game_id = await _create(client)
        resp = await client.post(f"/games/{game_id}/advance", json={"ms": -1})
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_pause_and_restart(self, client):
        game_id = await _create(client, seed=1)
        await client.post(f"/games/{game_id}/step")
        resp = await client.post(f"/games/{game_id}/pause")
        assert resp.json()["state"]["status"] == "paused"
        assert resp.json()["hud"]["status_text"] == "Paused"
        resp = await client.post(f"/games/{game_id}/restart")
        data = resp.json()
        assert data["state"]["status"] == "idle"
        assert data["state"]["score"] == 0

    @pytest.mark.asyncio
    async def test_delete(self, client):
        game_id = await _create(client)
        resp = await client.delete(f"/games/{game_id}")
        assert resp.status_code == 204
        assert (await client.get(f"/games/{game_id}")).status_code == 404
        assert (await client.delete(f"/games/{game_id}")).status_code == 404


class TestSessionManager:
    def test_prunes_oldest(self):
        manager = SessionManager(max_sessions=2)
        first = manager.create_session()
        manager.create_session()
        third = manager.create_session()
        assert len(manager) == 2
        with pytest.raises(KeyError):
            manager.get(first.game_id)
        assert manager.get(third.game_id) is third

    def test_invalid_bound(self):
        with pytest.raises(ValueError, match="max_sessions"):
            SessionManager(max_sessions=0)


class TestLifespan:
    def test_lifespan_installs_manager(self):
        with TestClient(create_app()) as tc:
            resp = tc.post("/games", json={})
            assert resp.status_code == 201
            assert tc.get("/games").json()[0]["status"] == "idle"
