"""
Schemas - Repository Identity

Owner, project and ref of the repository under assessment.
"""

from pydantic import BaseModel


# Symbolic ref meaning "the default branch head".
HEAD_SHA = "HEAD"


class RepoIdentity(BaseModel):
    """Identity of a hosted repository."""
    owner: str = ""
    project: str = ""
    ref: str = HEAD_SHA

    model_config = {"frozen": True}

    def is_complete(self) -> bool:
        return bool(self.owner) and bool(self.project)

    def is_head(self) -> bool:
        return not self.ref or self.ref == HEAD_SHA

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.project}"
