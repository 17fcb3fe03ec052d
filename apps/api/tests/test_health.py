import pytest
from httpx import ASGITransport, AsyncClient

from bbb_rooms.core.config import settings
from bbb_rooms.main import app


@pytest.mark.asyncio
async def test_health_endpoint(monkeypatch) -> None:
    monkeypatch.setattr(settings, "bbb_url", "")
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "conferencing": "missing"}


@pytest.mark.asyncio
async def test_health_reports_configured_conferencing(monkeypatch) -> None:
    monkeypatch.setattr(settings, "bbb_url", "https://bbb.example.com/bigbluebutton/")
    monkeypatch.setattr(settings, "bbb_secret", "secret")
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.get("/api/health")

    assert response.json()["conferencing"] == "configured"


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/", "/api/health"])
async def test_head_requests_answer_200(path: str) -> None:
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.head(path)

    assert response.status_code == 200
    assert response.content == b""


@pytest.mark.asyncio
async def test_robots_and_favicon() -> None:
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        robots = await client.get("/robots.txt")
        favicon = await client.get("/favicon.ico")

    assert robots.status_code == 200
    assert "User-agent" in robots.text
    assert favicon.status_code == 200
    assert favicon.headers.get("content-type") == "image/png"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("path", "marker"),
    [("/", "Meeting Rooms"), ("/dashboard", "/api/session"), ("/admin", "/api/session")],
)
async def test_pages_render(path: str, marker: str) -> None:
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.get(path)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert marker in response.text
