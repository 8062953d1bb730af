"""
Clients Module - Provider Code Search

Query translation and paginated search for GitLab and GitHub.
"""

from posture.clients.query import (
    GitHubQueryTranslator,
    GitLabQueryTranslator,
    QueryTranslator,
    get_translator,
    translate,
)
from posture.clients.search import (
    GitHubSearchHandler,
    GitLabSearchHandler,
    SearchHandler,
    get_search_handler,
)

__all__ = [
    "QueryTranslator",
    "GitLabQueryTranslator",
    "GitHubQueryTranslator",
    "get_translator",
    "translate",
    "SearchHandler",
    "GitLabSearchHandler",
    "GitHubSearchHandler",
    "get_search_handler",
]
