"""
Clients - Query Translator

Turns a provider-neutral SearchRequest into a provider-native query string.

Each provider's grammar quirks stay inside its translator class; the search
handlers only ever see the finished string.
"""

from abc import ABC, abstractmethod
from typing import List

from posture.errors import EmptyQueryError, IdentityError
from posture.schemas.repo import RepoIdentity
from posture.schemas.search import SearchRequest


class QueryTranslator(ABC):
    """Base class for provider query translators."""

    @abstractmethod
    def scope_clause(self, identity: RepoIdentity) -> str:
        """Clause restricting the search to one repository."""
        pass

    def sanitize(self, query: str) -> str:
        """Rewrite characters the provider grammar reserves. Identity by default."""
        return query

    def translate(self, identity: RepoIdentity, request: SearchRequest) -> str:
        """
        Build the provider-native query string.

        Clause order is fixed: query, repository scope, filename, path.

        Args:
            identity: Repository the search is scoped to
            request: Generic search request

        Returns:
            Query string for the provider's search endpoint

        Raises:
            EmptyQueryError: request.query is empty
            IdentityError: identity lacks an owner or project
        """
        if not request.query:
            raise EmptyQueryError()
        if identity is None or not identity.is_complete():
            raise IdentityError(f"incomplete repository identity: {identity!r}")

        clauses: List[str] = [
            self.sanitize(request.query),
            self.scope_clause(identity),
        ]
        if request.filename:
            clauses.append(f"in:file filename:{request.filename}")
        if request.path:
            clauses.append(f"path:{request.path}")
        return " ".join(clauses)


class GitLabQueryTranslator(QueryTranslator):
    """GitLab blob search grammar."""

    def scope_clause(self, identity: RepoIdentity) -> str:
        return f"project:{identity.owner}/{identity.project}"

    def sanitize(self, query: str) -> str:
        # "/" is a structural separator in GitLab's search syntax.
        return query.replace("/", " ")


class GitHubQueryTranslator(QueryTranslator):
    """GitHub code search grammar."""

    def scope_clause(self, identity: RepoIdentity) -> str:
        return f"repo:{identity.owner}/{identity.project}"


TRANSLATORS = {
    "gitlab": GitLabQueryTranslator,
    "github": GitHubQueryTranslator,
}


def get_translator(provider: str = "gitlab") -> QueryTranslator:
    """Factory function to get the translator for a provider."""
    try:
        return TRANSLATORS[provider]()
    except KeyError:
        raise ValueError(f"Unknown search provider: {provider}") from None


def translate(
    identity: RepoIdentity,
    request: SearchRequest,
    provider: str = "gitlab",
) -> str:
    """Translate a request with the given provider's rules."""
    return get_translator(provider).translate(identity, request)
