"""
Markdown rendering for the SOLID guide.
"""
import logging
from pathlib import Path
from typing import Callable, Optional

from solidguide.guide_models import Guide, Section, SnippetRef
from solidguide.snippet_extractor import extract_snippet


logger = logging.getLogger(__name__)

SUMMARY_HEADING = "## Summary"
BENEFITS_HEADING = "## Benefits"
SUMMARY_COLUMNS = ["Principle", "Illustrates", "Bad shape", "Good shape"]


class GuideRenderer:
    """Renders a Guide to a Markdown document."""

    def __init__(self, guide: Guide, snippet_source: Optional[Callable[[SnippetRef], str]] = None):
        """
        Initialize the renderer.

        Args:
            guide: Guide content to render
            snippet_source: Callable returning the code for a snippet reference
                (defaults to extracting it from the example modules)
        """
        self.guide = guide
        self.snippet_source = snippet_source or extract_snippet

    def render(self) -> str:
        """
        Render the complete guide.

        Returns:
            Markdown text ending with a newline
        """
        parts = [f"# {self.guide.title}"]

        if self.guide.introduction:
            parts.append(self.guide.introduction.strip())

        for number, section in enumerate(self.guide.sections, 1):
            parts.append(self.render_section(section, number))

        parts.append(self.render_summary())

        if self.guide.benefits:
            parts.append(self.render_benefits())

        logger.debug("Rendered guide with %d sections", len(self.guide.sections))
        return "\n\n".join(parts) + "\n"

    def render_section(self, section: Section, number: Optional[int] = None) -> str:
        """
        Render one principle section.

        Args:
            section: Section to render
            number: Heading number (defaults to the section's position in the guide)

        Returns:
            Markdown text for the section
        """
        if number is None:
            number = self.guide.sections.index(section) + 1

        parts = [f"## {number}. {section.name} ({section.acronym})"]
        if section.statement:
            parts.append(f"> {section.statement}")

        parts.append(self._render_snippet("Bad", section.bad))
        parts.append(self._render_snippet("Good", section.good))

        return "\n\n".join(parts)

    def render_summary(self) -> str:
        """Render the summary table."""
        lines = [
            SUMMARY_HEADING,
            "",
            "| " + " | ".join(SUMMARY_COLUMNS) + " |",
            "|" + "---|" * len(SUMMARY_COLUMNS),
        ]
        for row in self.guide.summary_rows():
            cells = [row.acronym, row.illustrates, row.bad_shape, row.good_shape]
            lines.append("| " + " | ".join(_escape_cell(cell) for cell in cells) + " |")
        return "\n".join(lines)

    def render_benefits(self) -> str:
        """Render the benefits list."""
        lines = [BENEFITS_HEADING, ""]
        lines.extend(f"- {benefit}" for benefit in self.guide.benefits)
        return "\n".join(lines)

    def write(self, file_path: str) -> Path:
        """
        Render the guide to a file.

        Args:
            file_path: Destination path

        Returns:
            Path of the written file
        """
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render(), encoding='utf-8')
        logger.info("Wrote guide to %s", path)
        return path

    def _render_snippet(self, label: str, ref: SnippetRef) -> str:
        parts = [f"### {label}"]
        if ref.explanation:
            parts.append(ref.explanation.strip())
        code = self.snippet_source(ref).rstrip()
        parts.append(f"```python\n{code}\n```")
        return "\n\n".join(parts)


def _escape_cell(text: str) -> str:
    return text.replace("|", "\\|")


def render_guide(guide: Guide) -> str:
    """Convenience function to render a guide to Markdown."""
    return GuideRenderer(guide).render()

