"""
Data models for the SOLID guide.
Defines the guide content schema and the issue type reported by validation.
"""
from dataclasses import dataclass, field, asdict
from typing import List, Dict, Any, Optional
from pathlib import Path
import logging
import yaml

from solidguide.errors import GuideContentError


logger = logging.getLogger(__name__)

# Canonical order of the five principles, as they appear in the guide.
PRINCIPLE_ORDER = ['SRP', 'OCP', 'LSP', 'ISP', 'DIP']

DEFAULT_GUIDE_PATH = Path(__file__).parent / "content" / "solid_guide.yaml"


# ============================================================================
# Guide Content Classes
# ============================================================================

@dataclass
class SnippetRef:
    """Points at the example module and objects that make up one snippet."""
    module: str
    objects: List[str] = field(default_factory=list)
    explanation: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SnippetRef':
        """Create from dictionary."""
        return cls(
            module=data['module'],
            objects=list(data.get('objects', [])),
            explanation=data.get('explanation', '')
        )


@dataclass
class SummaryRow:
    """One row of the guide's summary table."""
    acronym: str
    illustrates: str
    bad_shape: str
    good_shape: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class Section:
    """One principle of the guide with its bad/good contrast pair."""
    key: str
    acronym: str
    name: str
    statement: str
    bad: SnippetRef
    good: SnippetRef
    illustrates: str = ""
    bad_shape: str = ""
    good_shape: str = ""

    def summary_row(self) -> SummaryRow:
        """Build the summary table row for this section."""
        return SummaryRow(
            acronym=self.acronym,
            illustrates=self.illustrates,
            bad_shape=self.bad_shape,
            good_shape=self.good_shape
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'key': self.key,
            'acronym': self.acronym,
            'name': self.name,
            'statement': self.statement,
            'illustrates': self.illustrates,
            'bad_shape': self.bad_shape,
            'good_shape': self.good_shape,
            'bad': self.bad.to_dict(),
            'good': self.good.to_dict()
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Section':
        """Create from dictionary."""
        return cls(
            key=data['key'],
            acronym=data['acronym'],
            name=data['name'],
            statement=data.get('statement', ''),
            illustrates=data.get('illustrates', ''),
            bad_shape=data.get('bad_shape', ''),
            good_shape=data.get('good_shape', ''),
            bad=SnippetRef.from_dict(data['bad']),
            good=SnippetRef.from_dict(data['good'])
        )


@dataclass
class Guide:
    """The complete guide: introduction, principle sections and benefits."""
    title: str
    introduction: str = ""
    sections: List[Section] = field(default_factory=list)
    benefits: List[str] = field(default_factory=list)

    def summary_rows(self) -> List[SummaryRow]:
        """Summary table rows, in section order."""
        return [section.summary_row() for section in self.sections]

    def get_section(self, key: str) -> Optional[Section]:
        """Get a section by key or acronym (case-insensitive)."""
        wanted = key.lower()
        for section in self.sections:
            if section.key.lower() == wanted or section.acronym.lower() == wanted:
                return section
        return None

    def list_acronyms(self) -> List[str]:
        """List section acronyms in guide order."""
        return [section.acronym for section in self.sections]

    def validate(self) -> List[str]:
        """
        Validate guide content.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not self.title:
            errors.append("Title is required")

        acronyms = self.list_acronyms()
        if sorted(acronyms) != sorted(PRINCIPLE_ORDER):
            errors.append(
                f"Guide must cover exactly {', '.join(PRINCIPLE_ORDER)}; found {', '.join(acronyms) or 'none'}"
            )
        elif acronyms != PRINCIPLE_ORDER:
            errors.append(f"Sections out of order: expected {', '.join(PRINCIPLE_ORDER)}")

        seen_keys = set()
        for section in self.sections:
            if section.key in seen_keys:
                errors.append(f"Duplicate section key: {section.key}")
            seen_keys.add(section.key)

            if not section.statement:
                errors.append(f"Section {section.acronym}: statement is required")

            for label, ref in (('bad', section.bad), ('good', section.good)):
                if not ref.module:
                    errors.append(f"Section {section.acronym}: {label} snippet module is required")
                if not ref.objects:
                    errors.append(f"Section {section.acronym}: {label} snippet must list at least one object")

        if not self.benefits:
            errors.append("At least one benefit is required")

        return errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'title': self.title,
            'introduction': self.introduction,
            'sections': [section.to_dict() for section in self.sections],
            'benefits': list(self.benefits)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Guide':
        """Create from dictionary."""
        return cls(
            title=data['title'],
            introduction=data.get('introduction', ''),
            sections=[Section.from_dict(section) for section in data.get('sections', [])],
            benefits=list(data.get('benefits', []))
        )

    def save_to_yaml(self, file_path: str) -> Path:
        """Save guide content to YAML file."""
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

        return path

    @classmethod
    def load_from_yaml(cls, file_path: str) -> 'Guide':
        """
        Load guide content from YAML file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            yaml.YAMLError: If the file has invalid YAML syntax
            GuideContentError: If the YAML doesn't describe a guide
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Guide file not found: {path}")

        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise GuideContentError(f"Guide file {path} does not contain a mapping")

        try:
            guide = cls.from_dict(data)
        except (KeyError, TypeError) as e:
            raise GuideContentError(f"Malformed guide file {path}: {e}") from e

        logger.debug("Loaded guide %r with %d sections from %s", guide.title, len(guide.sections), path)
        return guide


# ============================================================================
# Validation Issue
# ============================================================================

@dataclass
class StructureIssue:
    """Represents a structural problem found in a rendition of the guide."""
    type: str  # "missing_section", "summary_mismatch", "invalid_code", etc.
    severity: str  # "error", "warning"
    section: str  # Principle acronym, "Summary", "Benefits" or ""
    location: str  # "line N" or ""
    message: str
    suggestion: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StructureIssue':
        """Create from dictionary."""
        return cls(**data)


# ============================================================================
# Utility Functions
# ============================================================================

def load_guide(file_path: Optional[str] = None) -> Guide:
    """Load the guide, defaulting to the bundled content."""
    return Guide.load_from_yaml(str(file_path or DEFAULT_GUIDE_PATH))


def save_guide(guide: Guide, file_path: str) -> Path:
    """Save a guide to a YAML file."""
    return guide.save_to_yaml(file_path)
