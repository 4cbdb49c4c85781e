"""
Structure validation for Markdown renditions of the SOLID guide.

This module checks that a guide document has the shape the guide promises:
five principle sections in canonical order, exactly one bad and one good
snippet per section, a summary table that lists the same principles in the
same order, and a benefits list.
"""
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from solidguide.guide_models import PRINCIPLE_ORDER, StructureIssue
from solidguide.violation_detector import ViolationDetector


logger = logging.getLogger(__name__)

SECTION_HEADING = re.compile(r'^##\s+(\d+)\.\s+(.+?)\s+\(([A-Za-z]+)\)\s*$')
SEPARATOR_CELL = re.compile(r'^:?-+:?$')
CELL_SPLIT = re.compile(r'(?<!\\)\|')


@dataclass
class CodeBlock:
    """A fenced code block found in the document."""
    line_number: int
    language: str
    code: str


@dataclass
class SnippetBlock:
    """A `### Bad` or `### Good` subsection of a principle section."""
    label: str  # "bad" or "good"
    line_number: int
    code_blocks: List[CodeBlock] = field(default_factory=list)


@dataclass
class PrincipleBlock:
    """A `## N. Name (ACR)` section of the document."""
    number: int
    name: str
    acronym: str
    line_number: int
    snippets: List[SnippetBlock] = field(default_factory=list)


@dataclass
class ParsedGuide:
    """Outline of a guide document, as found by the parser."""
    title: Optional[str] = None
    sections: List[PrincipleBlock] = field(default_factory=list)
    summary_line: Optional[int] = None
    summary_rows: List[List[str]] = field(default_factory=list)
    benefits_line: Optional[int] = None
    benefits: List[str] = field(default_factory=list)
    unclosed_fence_line: Optional[int] = None


class GuideDocumentParser:
    """Parses a Markdown guide into a ParsedGuide outline."""

    def __init__(self, markdown: str):
        """
        Initialize the parser.

        Args:
            markdown: Markdown text of the guide
        """
        self.lines = markdown.splitlines()

    def parse(self) -> ParsedGuide:
        """
        Walk the document once and collect its outline.

        Returns:
            ParsedGuide outline
        """
        parsed = ParsedGuide()
        region = None  # "principle", "summary", "benefits" or None
        current_section: Optional[PrincipleBlock] = None
        current_snippet: Optional[SnippetBlock] = None

        fence_start = None
        fence_language = ""
        fence_lines: List[str] = []

        for index, line in enumerate(self.lines, 1):
            stripped = line.strip()

            if fence_start is not None:
                if stripped.startswith("```"):
                    block = CodeBlock(fence_start, fence_language, "\n".join(fence_lines))
                    if region == "principle" and current_snippet is not None:
                        current_snippet.code_blocks.append(block)
                    fence_start = None
                    fence_lines = []
                else:
                    fence_lines.append(line)
                continue

            if stripped.startswith("```"):
                fence_start = index
                fence_language = stripped[3:].strip()
                continue

            if stripped.startswith("# ") and parsed.title is None:
                parsed.title = stripped[2:].strip()
                continue

            if stripped.startswith("## "):
                current_snippet = None
                match = SECTION_HEADING.match(stripped)
                heading = stripped[3:].strip().lower()
                if match:
                    current_section = PrincipleBlock(
                        number=int(match.group(1)),
                        name=match.group(2),
                        acronym=match.group(3).upper(),
                        line_number=index
                    )
                    parsed.sections.append(current_section)
                    region = "principle"
                elif heading == "summary":
                    parsed.summary_line = index
                    region = "summary"
                elif heading == "benefits":
                    parsed.benefits_line = index
                    region = "benefits"
                else:
                    region = None
                continue

            if stripped.startswith("### ") and region == "principle":
                label = stripped[4:].strip().lower()
                if label in ("bad", "good"):
                    current_snippet = SnippetBlock(label=label, line_number=index)
                    current_section.snippets.append(current_snippet)
                else:
                    current_snippet = None
                continue

            if region == "summary" and stripped.startswith("|"):
                cells = [cell.strip() for cell in CELL_SPLIT.split(stripped.strip("|"))]
                parsed.summary_rows.append(cells)
            elif region == "benefits" and stripped.startswith(("- ", "* ")):
                parsed.benefits.append(stripped[2:].strip())

        if fence_start is not None:
            parsed.unclosed_fence_line = fence_start

        return parsed


class StructureValidator:
    """Validates the structure of a Markdown guide document."""

    def __init__(self, markdown: str, source: str = "<string>", check_violations: bool = True):
        """
        Initialize the validator.

        Args:
            markdown: Markdown text of the guide
            source: Name of the document, used in reports
            check_violations: Also check that bad snippets violate their principle
                and good snippets violate none
        """
        self.markdown = markdown
        self.source = source
        self.check_violations = check_violations
        self.issues: List[StructureIssue] = []

    def validate(self) -> 'ValidationReport':
        """
        Run all structural checks.

        Returns:
            ValidationReport for the document
        """
        self.issues = []
        parsed = GuideDocumentParser(self.markdown).parse()

        if parsed.unclosed_fence_line is not None:
            self._add('unclosed_code', 'error', '', parsed.unclosed_fence_line,
                      "Code block is never closed",
                      "Add a closing ``` line")

        self._check_sections(parsed)
        for section in parsed.sections:
            self._check_snippets(section)
        self._check_summary(parsed)
        self._check_benefits(parsed)

        for issue in self.issues:
            logger.warning("%s: [%s] %s", self.source, issue.type, issue.message)

        return generate_validation_report(
            self.source,
            self.issues,
            [section.acronym for section in parsed.sections]
        )

    def _check_sections(self, parsed: ParsedGuide) -> None:
        found = [section.acronym for section in parsed.sections]

        for acronym in PRINCIPLE_ORDER:
            if acronym not in found:
                self._add('missing_section', 'error', acronym, None,
                          f"No section for {acronym}",
                          f"Add a '## N. <name> ({acronym})' section")

        seen = set()
        for section in parsed.sections:
            if section.acronym not in PRINCIPLE_ORDER:
                self._add('unexpected_section', 'error', section.acronym, section.line_number,
                          f"{section.acronym} is not a SOLID principle",
                          f"Use one of {', '.join(PRINCIPLE_ORDER)}")
            elif section.acronym in seen:
                self._add('duplicate_section', 'error', section.acronym, section.line_number,
                          f"{section.acronym} appears more than once",
                          "Merge the duplicate sections")
            seen.add(section.acronym)

        ordered = []
        for acronym in found:
            if acronym in PRINCIPLE_ORDER and acronym not in ordered:
                ordered.append(acronym)
        expected = [acronym for acronym in PRINCIPLE_ORDER if acronym in ordered]
        if ordered != expected:
            self._add('section_order', 'error', '', None,
                      f"Sections appear as {', '.join(ordered)}",
                      f"Order sections as {', '.join(PRINCIPLE_ORDER)}")

        for position, section in enumerate(parsed.sections, 1):
            if section.number != position:
                self._add('section_numbering', 'warning', section.acronym, section.line_number,
                          f"Section is numbered {section.number} but is section {position}",
                          f"Renumber the heading to {position}")

    def _check_snippets(self, section: PrincipleBlock) -> None:
        acronym = section.acronym
        by_label = {
            label: [snippet for snippet in section.snippets if snippet.label == label]
            for label in ("bad", "good")
        }

        for label, snippets in by_label.items():
            heading = label.capitalize()
            if not snippets:
                self._add('missing_snippet', 'error', acronym, section.line_number,
                          f"{acronym} has no '### {heading}' snippet",
                          f"Add a '### {heading}' subsection with one code block")
            elif len(snippets) > 1:
                self._add('duplicate_snippet', 'error', acronym, snippets[1].line_number,
                          f"{acronym} has {len(snippets)} '### {heading}' snippets",
                          "Keep exactly one")

        if len(by_label["bad"]) == 1 and len(by_label["good"]) == 1:
            if by_label["bad"][0].line_number > by_label["good"][0].line_number:
                self._add('snippet_order', 'error', acronym, by_label["good"][0].line_number,
                          f"{acronym} shows the good snippet before the bad one",
                          "Show the violation first, then the fix")

        for snippet in section.snippets:
            heading = snippet.label.capitalize()
            if not snippet.code_blocks:
                self._add('missing_code', 'error', acronym, snippet.line_number,
                          f"{acronym} '### {heading}' has no code block",
                          "Add one fenced python code block")
                continue
            if len(snippet.code_blocks) > 1:
                self._add('extra_code', 'error', acronym, snippet.code_blocks[1].line_number,
                          f"{acronym} '### {heading}' has {len(snippet.code_blocks)} code blocks",
                          "Merge them into a single code block")

            if len(by_label[snippet.label]) == 1:
                self._check_code(acronym, snippet, snippet.code_blocks[0])

    def _check_code(self, acronym: str, snippet: SnippetBlock, block: CodeBlock) -> None:
        try:
            detector = ViolationDetector(block.code, filename=f"{self.source}:{block.line_number}")
        except SyntaxError as e:
            self._add_invalid_code(acronym, snippet, block, f"is not valid Python: {e.msg}")
            return
        except ValueError as e:
            # Null bytes in the source on older interpreters
            self._add_invalid_code(acronym, snippet, block, f"cannot be parsed: {e}")
            return
        except (RecursionError, MemoryError):
            self._add_invalid_code(acronym, snippet, block, "nests too deeply to parse")
            return

        if not self.check_violations or acronym not in PRINCIPLE_ORDER:
            return

        violated = detector.principles_violated()
        if snippet.label == "bad" and acronym not in violated:
            self._add('violation_not_demonstrated', 'error', acronym, block.line_number,
                      f"{acronym} bad snippet does not show a {acronym} violation",
                      f"Make the bad snippet violate {acronym}")
        elif snippet.label == "good" and violated:
            self._add('violation_in_good_snippet', 'error', acronym, block.line_number,
                      f"{acronym} good snippet violates {', '.join(sorted(violated))}",
                      "Rewrite the good snippet so it follows every principle")

    def _add_invalid_code(self, acronym: str, snippet: SnippetBlock, block: CodeBlock, problem: str) -> None:
        self._add('invalid_code', 'error', acronym, block.line_number,
                  f"{acronym} {snippet.label} snippet {problem}",
                  "Fix the snippet so it parses")

    def _check_summary(self, parsed: ParsedGuide) -> None:
        if parsed.summary_line is None:
            self._add('missing_summary', 'error', 'Summary', None,
                      "No '## Summary' table",
                      "Add a summary table listing each principle")
            return

        rows = [row for row in parsed.summary_rows if not all(SEPARATOR_CELL.match(cell) for cell in row)]
        body = rows[1:]
        listed = [_plain(row[0]).upper() for row in body if row and row[0]]
        headings = [section.acronym for section in parsed.sections]

        if not body:
            self._add('missing_summary', 'error', 'Summary', parsed.summary_line,
                      "Summary table has no rows",
                      "Add one row per principle")
        elif listed != headings:
            self._add('summary_mismatch', 'error', 'Summary', parsed.summary_line,
                      f"Summary lists {', '.join(listed)} but sections are {', '.join(headings)}",
                      "List the same principles in the same order as the section headings")

    def _check_benefits(self, parsed: ParsedGuide) -> None:
        if parsed.benefits_line is None or not parsed.benefits:
            self._add('missing_benefits', 'warning', 'Benefits', parsed.benefits_line,
                      "No benefits list",
                      "Add a '## Benefits' section with at least one bullet")

    def _add(self, issue_type: str, severity: str, section: str, line_number: Optional[int],
             message: str, suggestion: str) -> None:
        self.issues.append(StructureIssue(
            type=issue_type,
            severity=severity,
            section=section,
            location=f"line {line_number}" if line_number else "",
            message=message,
            suggestion=suggestion
        ))


def _plain(cell: str) -> str:
    return cell.strip().strip('*`_').strip()


@dataclass
class ValidationReport:
    """Validation report with statistics."""
    source: str
    total_issues: int
    errors: int
    warnings: int
    issues: List[StructureIssue]
    success: bool
    message: str
    sections_found: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'source': self.source,
            'total_issues': self.total_issues,
            'errors': self.errors,
            'warnings': self.warnings,
            'issues': [issue.to_dict() for issue in self.issues],
            'success': self.success,
            'message': self.message,
            'sections_found': list(self.sections_found)
        }


def generate_validation_report(source: str, issues: List[StructureIssue],
                               sections_found: Optional[List[str]] = None) -> ValidationReport:
    """
    Generate a validation report.

    A document with warnings only is still considered valid.

    Args:
        source: Name of the validated document
        issues: Issues found
        sections_found: Section acronyms found, in document order

    Returns:
        Validation report
    """
    errors = sum(1 for issue in issues if issue.severity == "error")
    warnings = sum(1 for issue in issues if issue.severity == "warning")

    if errors == 0:
        message = f"✓ {source} has the expected guide structure"
        if warnings:
            message += f" ({warnings} warning(s))"
    else:
        message = f"✗ Found {errors} structural error(s) in {source}"

    return ValidationReport(
        source=source,
        total_issues=len(issues),
        errors=errors,
        warnings=warnings,
        issues=list(issues),
        success=errors == 0,
        message=message,
        sections_found=list(sections_found or [])
    )


def format_validation_report(report: ValidationReport) -> str:
    """
    Format a validation report as a human-readable string.

    Args:
        report: Validation report to format

    Returns:
        Formatted string
    """
    lines = []
    lines.append(f"\n{'='*60}")
    lines.append(f"Structure Report: {report.source}")
    lines.append(f"{'='*60}")
    lines.append(f"Status: {'✓ VALID' if report.success else '✗ INVALID'}")
    lines.append(f"Sections: {', '.join(report.sections_found) or 'none'}")
    lines.append(f"Total Issues: {report.total_issues}")

    if report.total_issues > 0:
        lines.append(f"  - Errors: {report.errors}")
        lines.append(f"  - Warnings: {report.warnings}")
        lines.append("")

        for i, issue in enumerate(report.issues, 1):
            lines.append(f"{i}. [{issue.severity.upper()}] {issue.type}")
            if issue.section:
                lines.append(f"   Section: {issue.section}")
            if issue.location:
                lines.append(f"   Location: {issue.location}")
            lines.append(f"   Message: {issue.message}")
            lines.append(f"   Suggestion: {issue.suggestion}")
            lines.append("")
    else:
        lines.append(f"\n{report.message}")

    lines.append(f"{'='*60}\n")
    return "\n".join(lines)


def validate_markdown(markdown: str, source: str = "<string>", check_violations: bool = True) -> ValidationReport:
    """Convenience function to validate Markdown text."""
    return StructureValidator(markdown, source, check_violations).validate()


def validate_file(file_path: str, check_violations: bool = True) -> ValidationReport:
    """
    Convenience function to validate a Markdown file.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Guide document not found: {path}")
    return validate_markdown(path.read_text(encoding='utf-8'), str(path), check_violations)
