import asyncio
import time
from urllib.parse import parse_qsl, urlsplit

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient
from starlette.routing import Mount

from ray_this.api.model import SnippetRequest
from ray_this.api.route import create_snippet, health, list_languages
from ray_this.api.server import create_app
from ray_this.config import PublishSettings
from ray_this.formatting import CodeFormatter
from ray_this.language import LanguageTable
from ray_this.utils import decode_code


class _StubFormatter(CodeFormatter):
    def __init__(self):
        self.calls = []

    def format(self, text):
        self.calls.append(text)
        return text.replace("  ", " ")


def _make_table():
    return LanguageTable.from_entries(
        [
            {"value": "python", "extensions": ["py", "pyi"]},
            {"value": "rust", "extensions": ["rs"]},
        ]
    )


@pytest.mark.asyncio
async def test_health():
    assert await health() == {"status": "ok"}


@pytest.mark.asyncio
async def test_create_snippet_builds_url():
    formatter = _StubFormatter()
    payload = SnippetRequest(
        code="fn  main() {}",
        file_name="src/main.rs",
        options={"colors": "sunset", "darkMode": "true"},
    )

    response = await create_snippet(
        payload,
        settings=PublishSettings(),
        table=_make_table(),
        formatter=formatter,
    )

    assert formatter.calls == ["fn  main() {}"]
    assert response.title == "main.rs"
    assert response.language == "rust"
    assert decode_code(response.encoded) == "fn main() {}"

    params = dict(parse_qsl(urlsplit(response.url).query))
    assert params["colors"] == "sunset"
    assert params["darkMode"] == "true"
    assert params["code"] == response.encoded


@pytest.mark.asyncio
async def test_create_snippet_can_skip_formatting():
    formatter = _StubFormatter()
    payload = SnippetRequest(code="  x  =  1  ", file_name="calc.py", format=False)

    response = await create_snippet(
        payload,
        settings=PublishSettings(),
        table=_make_table(),
        formatter=formatter,
    )

    assert formatter.calls == []
    assert decode_code(response.encoded) == "x  =  1"


@pytest.mark.asyncio
async def test_create_snippet_rejects_empty_code():
    payload = SnippetRequest(code="")

    with pytest.raises(HTTPException) as exc_info:
        await create_snippet(
            payload,
            settings=PublishSettings(),
            table=_make_table(),
            formatter=_StubFormatter(),
        )

    assert exc_info.value.status_code == 400
    assert "text selected" in exc_info.value.detail


@pytest.mark.asyncio
async def test_list_languages_preserves_table_order():
    languages = await list_languages(table=_make_table())

    assert [language.value for language in languages] == ["python", "rust"]
    assert languages[0].extensions == ["py", "pyi"]


class _SlowFormatter(CodeFormatter):
    def format(self, text):
        time.sleep(0.5)
        return text


@pytest.mark.asyncio
async def test_create_snippet_does_not_block_event_loop():
    payload = SnippetRequest(code="print(1)", file_name="a.py")
    loop = asyncio.get_running_loop()
    started = loop.time()

    async def _tick():
        await asyncio.sleep(0.05)
        return loop.time() - started

    request_task = asyncio.create_task(
        create_snippet(
            payload,
            settings=PublishSettings(),
            table=_make_table(),
            formatter=_SlowFormatter(),
        )
    )
    tick_elapsed = await _tick()
    response = await request_task

    assert tick_elapsed < 0.4
    assert response.language == "python"


@pytest.fixture
def client():
    app = create_app(PublishSettings())
    app.state.language_table = _make_table()
    app.state.formatter = _StubFormatter()
    return TestClient(app)


def test_post_snippets_over_http(client):
    response = client.post(
        "/snippets",
        json={"code": "fn  main() {}", "file_name": "main.rs", "options": {"padding": "64"}},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["language"] == "rust"
    assert body["title"] == "main.rs"
    assert "padding=64" in body["url"]


def test_post_empty_snippet_over_http_is_400(client):
    response = client.post("/snippets", json={"code": ""})

    assert response.status_code == 400
    assert "text selected" in response.json()["detail"]


def test_get_languages_and_health_over_http(client):
    assert client.get("/health").json() == {"status": "ok"}
    assert [item["value"] for item in client.get("/languages").json()] == ["python", "rust"]


def test_mcp_app_is_mounted():
    app = create_app(PublishSettings())

    mounts = [route for route in app.routes if isinstance(route, Mount)]

    assert [mount.path for mount in mounts] == ["/mcp"]
