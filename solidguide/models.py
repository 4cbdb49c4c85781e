"""Data models for the guide HTTP API."""
from typing import List

from pydantic import BaseModel


class PrincipleSummary(BaseModel):
    """One principle as listed in the summary table."""
    key: str
    acronym: str
    name: str
    statement: str
    illustrates: str
    bad_shape: str
    good_shape: str


class Snippet(BaseModel):
    """A rendered contrast-pair snippet."""
    module: str
    objects: List[str]
    explanation: str
    code: str


class PrincipleDetail(PrincipleSummary):
    """A principle with both of its snippets."""
    bad: Snippet
    good: Snippet


class ValidateRequest(BaseModel):
    """Markdown guide to validate."""
    markdown: str
    check_violations: bool = True


class IssueModel(BaseModel):
    """A structural issue in a validated guide."""
    type: str
    severity: str
    section: str
    location: str
    message: str
    suggestion: str


class ValidationResponse(BaseModel):
    """Result of validating a Markdown guide."""
    source: str
    success: bool
    message: str
    total_issues: int
    errors: int
    warnings: int
    sections_found: List[str]
    issues: List[IssueModel]
