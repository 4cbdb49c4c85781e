"""Guide endpoint handlers."""
from functools import lru_cache
from typing import List

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse

from solidguide.guide_models import Guide, Section, SnippetRef, load_guide
from solidguide.models import (
    PrincipleDetail,
    PrincipleSummary,
    Snippet,
    ValidateRequest,
    ValidationResponse,
)
from solidguide.renderer import GuideRenderer
from solidguide.snippet_extractor import extract_snippet
from solidguide.structure_validator import validate_markdown

router = APIRouter()


@lru_cache(maxsize=1)
def get_guide() -> Guide:
    """Load the bundled guide once per process."""
    return load_guide()


@lru_cache(maxsize=1)
def get_rendered_guide() -> str:
    """Render the bundled guide once per process."""
    return GuideRenderer(get_guide()).render()


def _summary(section: Section) -> dict:
    return {
        "key": section.key,
        "acronym": section.acronym,
        "name": section.name,
        "statement": section.statement,
        "illustrates": section.illustrates,
        "bad_shape": section.bad_shape,
        "good_shape": section.good_shape,
    }


def _snippet(ref: SnippetRef) -> Snippet:
    return Snippet(
        module=ref.module,
        objects=ref.objects,
        explanation=ref.explanation,
        code=extract_snippet(ref)
    )


@router.get("/principles", response_model=List[PrincipleSummary])
async def list_principles():
    """
    List the five principles in guide order.

    Returns:
        List of principle summaries
    """
    return [PrincipleSummary(**_summary(section)) for section in get_guide().sections]


@router.get("/principles/{key}", response_model=PrincipleDetail)
def get_principle(key: str):
    """
    Get one principle with its bad and good snippets.

    Args:
        key: Principle key or acronym, case-insensitive

    Returns:
        PrincipleDetail for the principle

    Raises:
        HTTPException: 404 if the principle doesn't exist
    """
    section = get_guide().get_section(key)
    if section is None:
        raise HTTPException(status_code=404, detail=f"Principle {key} not found")

    return PrincipleDetail(
        **_summary(section),
        bad=_snippet(section.bad),
        good=_snippet(section.good)
    )


@router.get("/guide", response_class=PlainTextResponse)
async def get_guide_markdown():
    """
    Get the complete guide as Markdown.

    Returns:
        Markdown document
    """
    return PlainTextResponse(get_rendered_guide(), media_type="text/markdown")


@router.post("/validate", response_model=ValidationResponse)
def validate_guide(request: ValidateRequest):
    """
    Validate the structure of a Markdown guide.

    Args:
        request: Markdown text and options

    Returns:
        Validation report
    """
    report = validate_markdown(request.markdown, source="request", check_violations=request.check_violations)
    return ValidationResponse(**report.to_dict())
