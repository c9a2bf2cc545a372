"""Prompt state models.

A ``PromptState`` is built fresh on every render and thrown away once it has
been formatted.
"""

from typing import Literal, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from vcs_prompt.vcs.base import VCSType


class StatusRecord(BaseModel):
    """Normalized working copy status for a single backend."""

    model_config = ConfigDict(frozen=True)

    vcs_type: VCSType = Field(description="Backend that produced the record")
    branch_label: str = Field(default="", description="Current branch, empty when unknown or not applicable")
    untracked_count: int = Field(default=0, ge=0, description="Paths never added to version control")
    changed_count: int = Field(default=0, ge=0, description="Tracked paths with unrecorded changes")
    staged_count: int = Field(default=0, ge=0, description="Paths recorded in the index")
    ahead_count: int = Field(default=0, ge=0, description="Local commits not yet pushed")
    behind_count: int = Field(default=0, ge=0, description="Fetched commits not yet merged")

    @model_validator(mode="after")
    def validate_backend_fields(self) -> Self:
        """Keep index and tracking counts zero for backends without them.

        Returns:
            Self

        Raises:
            ValueError: If a count or label is set on a backend that lacks the concept
        """
        if self.vcs_type is not VCSType.GIT and (self.staged_count or self.ahead_count or self.behind_count):
            raise ValueError(f"{self.vcs_type.display_name} has no staging area or remote tracking")
        if self.vcs_type is VCSType.SVN and self.branch_label:
            raise ValueError("Subversion records carry no branch label")
        return self

    @property
    def is_clean(self) -> bool:
        """Check whether all five counts are zero.

        Returns:
            True if nothing is untracked, changed, staged, ahead or behind
        """
        return not (
            self.untracked_count or self.changed_count or self.staged_count or self.ahead_count or self.behind_count
        )


class NotInTree(BaseModel):
    """No backend owns the directory."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["not_in_tree"] = "not_in_tree"


class Status(BaseModel):
    """A successfully parsed working copy status."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["status"] = "status"
    record: StatusRecord


class ParseError(BaseModel):
    """A backend ran but its output could not be classified.

    Also carries literal special conditions such as a required metadata upgrade.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["parse_error"] = "parse_error"
    vcs_type: VCSType
    message: str
    special: bool = Field(default=False, description="True for a literal, actionable condition")


PromptState = NotInTree | Status | ParseError
