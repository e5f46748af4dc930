from unittest.mock import patch

import httpx
import pytest

from dev_diary.integrations.notion import NotionClient, NotionClientError, split_text


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            request = httpx.Request("POST", "https://api.notion.com/v1/pages")
            raise httpx.HTTPStatusError(
                "error", request=request, response=httpx.Response(self.status_code)
            )

    def json(self):
        return self._payload


class MockAsyncClient:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code
        self.calls = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def post(self, url, json=None, headers=None):
        self.calls.append({"url": url, "json": json, "headers": headers})
        return FakeResponse(self.payload, self.status_code)


@pytest.fixture
def client():
    return NotionClient("secret", "db-id")


def test_requires_credentials():
    with pytest.raises(ValueError):
        NotionClient("", "db-id")
    with pytest.raises(ValueError):
        NotionClient("secret", "")


class TestSplitText:
    def test_short_text_single_chunk(self):
        assert split_text("hello") == ["hello"]

    def test_empty_text(self):
        assert split_text("") == []

    def test_chunks_respect_limit(self):
        text = "\n".join("line %04d" % i for i in range(1000))
        chunks = split_text(text, size=2000)
        assert all(len(chunk) <= 2000 for chunk in chunks)
        assert "\n".join(chunks) == text

    def test_long_line_hard_split(self):
        chunks = split_text("x" * 4500)
        assert [len(c) for c in chunks] == [2000, 2000, 500]


async def test_create_entry(client):
    mock = MockAsyncClient({"url": "https://notion.so/page-1"})
    with patch("httpx.AsyncClient", return_value=mock):
        url = await client.create_entry("My Diary", "Body text", ["python"])

    assert url == "https://notion.so/page-1"
    call = mock.calls[0]
    assert call["url"] == "https://api.notion.com/v1/pages"
    assert call["headers"]["Notion-Version"] == "2022-06-28"
    payload = call["json"]
    assert payload["parent"] == {"database_id": "db-id"}
    assert payload["properties"]["title"]["title"][0]["text"]["content"] == "My Diary"
    assert payload["properties"]["Tags"]["multi_select"] == [{"name": "python"}]
    children = payload["children"]
    assert children[0]["paragraph"]["rich_text"][0]["annotations"] == {"bold": True}
    assert children[1]["paragraph"]["rich_text"][0]["text"]["content"] == "Body text"


async def test_create_entry_caps_blocks(client):
    mock = MockAsyncClient({"url": "https://notion.so/page-1"})
    with patch("httpx.AsyncClient", return_value=mock):
        await client.create_entry("Long", "y" * 2000 * 150, [])
    assert len(mock.calls[0]["json"]["children"]) == 100


async def test_create_entry_http_error(client):
    with patch("httpx.AsyncClient", return_value=MockAsyncClient({}, status_code=401)):
        with pytest.raises(NotionClientError):
            await client.create_entry("t", "b", [])


async def test_create_entry_without_url(client):
    with patch("httpx.AsyncClient", return_value=MockAsyncClient({"id": "x"})):
        with pytest.raises(NotionClientError):
            await client.create_entry("t", "b", [])


async def test_get_recent_entries(client):
    page = {
        "id": "p1",
        "url": "https://notion.so/p1",
        "properties": {
            "title": {"title": [{"plain_text": "Day One"}]},
            "Date": {"date": {"start": "2024-03-05"}},
            "Tags": {"multi_select": [{"name": "python"}]},
        },
    }
    mock = MockAsyncClient({"results": [page]})
    with patch("httpx.AsyncClient", return_value=mock):
        entries = await client.get_recent_entries(limit=3)

    assert mock.calls[0]["url"].endswith("/databases/db-id/query")
    assert mock.calls[0]["json"]["page_size"] == 3
    assert entries[0].id == "p1"
    assert entries[0].url == "https://notion.so/p1"
    assert entries[0].title == "Day One"
    assert entries[0].date == "2024-03-05"
