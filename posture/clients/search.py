"""
Clients - Search Handlers

Paginated code search against a hosting provider's REST API.

A handler is bound to one repository with init(), then serves any number of
search() calls. Pages are fetched one after another so results keep the
provider's order. A failure on any page aborts the whole search.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import httpx

from posture.clients.query import (
    GitHubQueryTranslator,
    GitLabQueryTranslator,
    QueryTranslator,
)
from posture.config import get_settings
from posture.errors import IdentityError, TransportError
from posture.schemas.repo import RepoIdentity
from posture.schemas.search import SearchRequest, SearchResponse, SearchResult

logger = logging.getLogger(__name__)


# (paths on this page, provider-reported total or None, next page number or None)
PageInfo = Tuple[List[str], Optional[int], Optional[int]]


class SearchHandler(ABC):
    """Base class for provider search handlers."""

    translator_class = QueryTranslator

    def __init__(self, settings=None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings or get_settings()
        self.translator = self.translator_class()
        self.identity: Optional[RepoIdentity] = None
        self._transport = transport

    def init(self, identity: RepoIdentity) -> None:
        """Bind the handler to a repository."""
        self.identity = identity

    @property
    @abstractmethod
    def search_url(self) -> str:
        """Endpoint URL for the bound repository."""
        ...

    @abstractmethod
    def headers(self) -> Dict[str, str]:
        ...

    @abstractmethod
    def params(self, query: str, page: int) -> Dict[str, Any]:
        ...

    @abstractmethod
    def parse_page(self, response: httpx.Response) -> PageInfo:
        """Extract item paths, total hits and next page from one response."""
        ...

    async def search(self, request: SearchRequest) -> SearchResponse:
        """
        Run a code search in the bound repository.

        Args:
            request: Generic search request

        Returns:
            SearchResponse with every fetched item in provider order and the
            provider-reported total in hits

        Raises:
            IdentityError: init() was not called
            SearchValidationError: the request cannot be translated
            TransportError: any page fetch failed or returned garbage
        """
        if self.identity is None:
            raise IdentityError("search handler used before init()")

        query = self.translator.translate(self.identity, request)

        paths: List[str] = []
        total: Optional[int] = None
        max_pages = self.settings.search.max_pages

        try:
            async with httpx.AsyncClient(
                headers=self.headers(),
                timeout=self.settings.search.timeout_seconds,
                transport=self._transport,
            ) as client:
                page: Optional[int] = 1
                fetched = 0

                while page is not None and fetched < max_pages:
                    response = await client.get(
                        self.search_url, params=self.params(query, page)
                    )
                    response.raise_for_status()

                    page_paths, page_total, next_page = self.parse_page(response)
                    paths.extend(page_paths)
                    if total is None:
                        total = page_total
                    fetched += 1

                    logger.debug(
                        f"Fetched search page {page} for {self.identity.full_name}: "
                        f"{len(page_paths)} items"
                    )
                    page = next_page

            return SearchResponse(
                results=[SearchResult(path=p) for p in paths],
                hits=total if total is not None else len(paths),
            )
        except httpx.HTTPError as e:
            raise TransportError(f"search request failed: {e}") from e
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise TransportError(f"malformed search response: {e}") from e


class GitLabSearchHandler(SearchHandler):
    """Blob search through the GitLab projects API."""

    translator_class = GitLabQueryTranslator

    @property
    def search_url(self) -> str:
        base_url = self.settings.gitlab.base_url.rstrip("/")
        # /projects/:id takes a numeric id or the encoded namespace/path.
        project = self.identity.project
        if not project.isdigit():
            project = self.identity.full_name
        project = quote(project, safe="")
        return f"{base_url}/api/v4/projects/{project}/search"

    def headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.settings.gitlab.token:
            headers["PRIVATE-TOKEN"] = self.settings.gitlab.token
        return headers

    def params(self, query: str, page: int) -> Dict[str, Any]:
        params = {
            "scope": "blobs",
            "search": query,
            "per_page": self.settings.search.per_page,
            "page": page,
        }
        if not self.identity.is_head():
            params["ref"] = self.identity.ref
        return params

    def parse_page(self, response: httpx.Response) -> PageInfo:
        blobs = response.json()
        if not isinstance(blobs, list):
            raise TypeError(f"expected a list of blobs, got {type(blobs).__name__}")

        paths = [blob.get("path") or blob["filename"] for blob in blobs]

        total_header = response.headers.get("X-Total", "")
        total = int(total_header) if total_header else None

        next_header = response.headers.get("X-Next-Page", "")
        next_page = int(next_header) if next_header else None

        return paths, total, next_page


class GitHubSearchHandler(SearchHandler):
    """Code search through the GitHub REST API."""

    translator_class = GitHubQueryTranslator

    @property
    def search_url(self) -> str:
        return f"{self.settings.github.api_url.rstrip('/')}/search/code"

    def headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/vnd.github+json"}
        if self.settings.github.token:
            headers["Authorization"] = f"Bearer {self.settings.github.token}"
        return headers

    def params(self, query: str, page: int) -> Dict[str, Any]:
        return {
            "q": query,
            "per_page": self.settings.search.per_page,
            "page": page,
        }

    def parse_page(self, response: httpx.Response) -> PageInfo:
        data = response.json()
        paths = [item["path"] for item in data.get("items", [])]
        total = int(data["total_count"])

        current = int(response.request.url.params.get("page", "1"))
        next_page = current + 1 if "next" in response.links else None

        return paths, total, next_page


HANDLERS = {
    "gitlab": GitLabSearchHandler,
    "github": GitHubSearchHandler,
}


def get_search_handler(
    provider: str = "gitlab",
    settings=None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> SearchHandler:
    """Factory function to get the search handler for a provider."""
    if provider not in HANDLERS:
        raise ValueError(f"Unknown search provider: {provider}")
    return HANDLERS[provider](settings, transport=transport)
