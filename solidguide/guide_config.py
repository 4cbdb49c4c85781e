"""
Configuration for the SOLID guide tooling.
"""
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, List
import json
import logging


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = ".solidguide/settings/guide.json"


@dataclass
class GuideConfig:
    """Manages guide tooling configuration."""
    content_path: str = ""  # Empty means the bundled guide content
    output_path: str = "docs/SOLID.md"
    check_violations: bool = True
    api_title: str = "SOLID Guide"
    config_path: str = DEFAULT_CONFIG_PATH

    def load(self) -> 'GuideConfig':
        """Load configuration from file. A missing file leaves the defaults."""
        path = Path(self.config_path)
        if not path.exists():
            logger.debug("No config at %s, using defaults", path)
            return self

        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        guide_data = data.get('guide', {})
        self.content_path = guide_data.get('content_path', '')
        self.output_path = guide_data.get('output_path', 'docs/SOLID.md')
        self.check_violations = guide_data.get('check_violations', True)
        self.api_title = guide_data.get('api_title', 'SOLID Guide')

        return self

    def save(self) -> None:
        """Save configuration to file."""
        path = Path(self.config_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump({'guide': self.to_dict()}, f, indent=2)

    def validate(self) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not self.output_path:
            errors.append("output_path is required")
        elif not self.output_path.endswith('.md'):
            errors.append(f"output_path must be a Markdown file: {self.output_path}")

        if self.content_path and not self.content_path.endswith(('.yaml', '.yml')):
            errors.append(f"content_path must be a YAML file: {self.content_path}")

        if not isinstance(self.check_violations, bool):
            errors.append("check_violations must be true or false")

        if not self.api_title:
            errors.append("api_title is required")

        return errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, without the config path itself."""
        data = asdict(self)
        del data['config_path']
        return data

    @classmethod
    def create_default(cls, config_path: str = DEFAULT_CONFIG_PATH) -> 'GuideConfig':
        """Create a default configuration."""
        return cls(config_path=config_path)


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> GuideConfig:
    """Load guide configuration."""
    config = GuideConfig(config_path=config_path)
    return config.load()


def save_config(config: GuideConfig) -> None:
    """Save guide configuration."""
    config.save()
