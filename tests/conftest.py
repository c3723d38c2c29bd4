"""Shared test fixtures for semscholar.

Provides:
- StubServer: an httpx.MockTransport handler that records requests
- client: S2Client wired to the stub
- Sample API payloads
"""

import json
from typing import Any, Callable

import httpx
import pytest

from semscholar import S2Client

BASE_URL = "https://s2.test/graph/v1"


class StubServer:
    """Canned-response handler for httpx.MockTransport.

    Records every request and every response it hands out, so tests can
    inspect the URL/body that was sent and check the response was closed.

    Usage:
        def test_something(stub, client):
            stub.respond(200, json={"authorId": "A1"})
            client.get_author("A1")
            assert stub.last_request.url.path.endswith("/author/A1")
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responses: list[httpx.Response] = []
        self._status = 200
        self._content = b"{}"
        self._headers: dict[str, str] = {}
        self._dynamic: Callable[[httpx.Request], httpx.Response] | None = None

    def respond(
        self,
        status: int = 200,
        json: Any = None,
        text: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        if text is not None:
            self._content = text.encode()
        else:
            self._content = _dumps(json)
        self._status = status
        self._headers = headers or {}

    def respond_with(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self._dynamic = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._dynamic is not None:
            response = self._dynamic(request)
        else:
            # Iterator content keeps the body unread until the client consumes it
            response = httpx.Response(
                self._status, content=iter([self._content]), headers=self._headers
            )
        self.responses.append(response)
        return response

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_response(self) -> httpx.Response:
        return self.responses[-1]


def _dumps(payload: Any) -> bytes:
    return json.dumps(payload).encode()


@pytest.fixture
def stub() -> StubServer:
    return StubServer()


@pytest.fixture
def client(stub: StubServer):
    """S2Client backed by the stub transport."""
    http_client = httpx.Client(transport=httpx.MockTransport(stub))
    with S2Client(base_url=BASE_URL, http_client=http_client) as s2:
        yield s2
    http_client.close()


# -----------------------------------------------------------------------------
# Sample payloads
# -----------------------------------------------------------------------------


@pytest.fixture
def sample_author_response() -> dict:
    """Sample author response from S2 API."""
    return {
        "authorId": "1741101",
        "name": "Oren Etzioni",
        "url": "https://www.semanticscholar.org/author/1741101",
        "affiliations": ["Allen Institute for AI"],
        "hIndex": 92,
        "paperCount": 420,
        "citationCount": 51000,
    }


@pytest.fixture
def sample_paper_response() -> dict:
    """Sample paper response from S2 API."""
    return {
        "paperId": "649def34f8be52c8b66281af98ae884c09aef38b",
        "corpusId": 14457330,
        "externalIds": {
            "DOI": "10.1214/17-AOS1609",
            "ArXiv": "1608.00060",
        },
        "title": "Double/debiased machine learning for treatment and structural parameters",
        "abstract": "We revisit the classic problem of estimation...",
        "url": "https://www.semanticscholar.org/paper/649def34f8be52c8b66281af98ae884c09aef38b",
        "venue": "The Annals of Statistics",
        "year": 2018,
        "publicationDate": "2018-04-01",
        "authors": [
            {"authorId": "26331346", "name": "Victor Chernozhukov"},
            {"authorId": "2149494", "name": "Denis Chetverikov"},
        ],
        "referenceCount": 78,
        "citationCount": 1542,
        "fieldsOfStudy": ["Economics", "Mathematics"],
        "isOpenAccess": True,
        "openAccessPdf": {
            "url": "https://arxiv.org/pdf/1608.00060.pdf",
            "status": "GREEN",
        },
        "publicationTypes": ["JournalArticle"],
    }


@pytest.fixture
def sample_search_response(sample_paper_response: dict) -> dict:
    """Sample paper search response from S2 API."""
    return {
        "total": 1542,
        "offset": 0,
        "next": 10,
        "data": [sample_paper_response],
    }


@pytest.fixture
def sample_diff_list_response() -> dict:
    """Sample dataset diff list from the Datasets API."""
    return {
        "dataset": "s2orc",
        "start_release": "r1",
        "end_release": "r2",
        "diffs": [
            {
                "from_release": "r1",
                "to_release": "r1.5",
                "update_files": ["https://files.test/s2orc/r1.5/update-0.jsonl.gz"],
                "delete_files": ["https://files.test/s2orc/r1.5/delete-0.jsonl.gz"],
            },
            {
                "from_release": "r1.5",
                "to_release": "r2",
                "update_files": ["https://files.test/s2orc/r2/update-0.jsonl.gz"],
                "delete_files": [],
            },
        ],
    }
