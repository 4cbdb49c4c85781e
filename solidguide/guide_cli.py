"""
CLI interface for the SOLID guide.

Provides command-line interface for working with the guide:
- init: Write the default configuration
- list: List the five principles
- show: Print one principle section
- render: Render the guide to Markdown
- validate: Check the structure of a Markdown guide
- check: Check that bad examples violate their principle and good ones don't
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from solidguide.guide_config import GuideConfig, DEFAULT_CONFIG_PATH, load_config
from solidguide.guide_models import Guide, load_guide
from solidguide.renderer import GuideRenderer
from solidguide.structure_validator import validate_file
from solidguide.violation_detector import detect_in_module


# ANSI color codes for terminal output
class Colors:
    """ANSI color codes for terminal formatting."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    RED = '\033[91m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    CYAN = '\033[96m'
    GRAY = '\033[90m'


class GuideCLI:
    """Command-line interface for the SOLID guide."""

    def __init__(self, repo_root: str = "."):
        """
        Initialize CLI.

        Args:
            repo_root: Root directory that relative paths are resolved against
        """
        self.repo_root = Path(repo_root)
        self.config_path = self.repo_root / DEFAULT_CONFIG_PATH
        self.config = load_config(str(self.config_path))

        errors = self.config.validate()
        if errors:
            print(f"{Colors.RED}✗ Invalid configuration: {self.config_path}{Colors.RESET}")
            for error in errors:
                print(f"  {Colors.RED}- {error}{Colors.RESET}")
            sys.exit(1)

    def init(self) -> None:
        """Write the default configuration file."""
        print(f"{Colors.BOLD}Initializing SOLID guide settings...{Colors.RESET}\n")

        if self.config_path.exists():
            print(f"{Colors.YELLOW}⚠  Already initialized{Colors.RESET}")
            print(f"  Config file: {self.config_path}")
            return

        config = GuideConfig.create_default(config_path=str(self.config_path))
        config.save()
        self.config = config

        print(f"{Colors.GREEN}✓ Settings written{Colors.RESET}\n")
        print(f"  Config: {self.config_path}")
        print(f"  Output: {config.output_path}")
        print(f"\n{Colors.CYAN}Next step:{Colors.RESET}")
        print(f"  solid-guide render")

    def list_principles(self) -> None:
        """Print every principle with its statement."""
        guide = self._load_guide()

        print(f"{Colors.BOLD}{guide.title}{Colors.RESET}\n")
        for number, section in enumerate(guide.sections, 1):
            print(f"{number}. {Colors.BOLD}{section.acronym}{Colors.RESET} {section.name}")
            print(f"   {Colors.GRAY}{section.statement}{Colors.RESET}")

    def show(self, key: str) -> None:
        """
        Print one rendered principle section.

        Args:
            key: Section key or acronym (e.g. "srp")
        """
        guide = self._load_guide()
        section = guide.get_section(key)

        if section is None:
            print(f"{Colors.RED}✗ Unknown principle: {key}{Colors.RESET}")
            print(f"  Available: {', '.join(guide.list_acronyms())}")
            sys.exit(1)

        print(GuideRenderer(guide).render_section(section))

    def render(self, output: Optional[str] = None) -> None:
        """
        Render the guide to Markdown.

        Args:
            output: Destination path (defaults to the configured output path)
        """
        guide = self._load_guide()

        errors = guide.validate()
        if errors:
            print(f"{Colors.RED}✗ Guide content is invalid{Colors.RESET}")
            for error in errors:
                print(f"  - {error}")
            sys.exit(1)

        destination = self._resolve(output or self.config.output_path)
        path = GuideRenderer(guide).write(str(destination))

        print(f"{Colors.GREEN}✓ Guide rendered{Colors.RESET}")
        print(f"  Sections: {', '.join(guide.list_acronyms())}")
        print(f"  Output: {path}")

    def validate(self, path: Optional[str] = None) -> None:
        """
        Validate the structure of a Markdown guide.

        Args:
            path: Markdown file (defaults to the configured output path)
        """
        target = self._resolve(path or self.config.output_path)
        print(f"{Colors.BOLD}Validating {target}...{Colors.RESET}\n")

        report = validate_file(str(target), check_violations=self.config.check_violations)

        for i, issue in enumerate(report.issues, 1):
            severity_color = Colors.RED if issue.severity == "error" else Colors.YELLOW
            print(f"  {i}. [{severity_color}{issue.severity.upper()}{Colors.RESET}] {issue.type}")
            if issue.section:
                print(f"     Section: {issue.section}")
            if issue.location:
                print(f"     Location: {Colors.GRAY}{issue.location}{Colors.RESET}")
            print(f"     Message: {issue.message}")
            print(f"     Suggestion: {Colors.CYAN}{issue.suggestion}{Colors.RESET}")
            print()

        print(f"{Colors.BOLD}{'='*60}{Colors.RESET}")
        if report.success:
            print(f"{Colors.GREEN}{report.message}{Colors.RESET}")
        else:
            print(f"{Colors.RED}{report.message}{Colors.RESET}")
            print(f"  Errors: {report.errors}")
            print(f"  Warnings: {report.warnings}")
            sys.exit(1)

    def check(self, modules: Optional[List[str]] = None) -> None:
        """
        Run the violation detector over example modules.

        With explicit modules, prints what was found. Without, checks every
        contrast pair of the guide: the bad module must violate its own
        principle and the good module must violate none.

        Args:
            modules: Dotted module names to inspect
        """
        if modules:
            for module_name in modules:
                violations = detect_in_module(module_name)
                print(f"{Colors.BOLD}{module_name}{Colors.RESET}")
                if not violations:
                    print(f"  {Colors.GREEN}✓ No violations{Colors.RESET}")
                for violation in violations:
                    print(f"  {Colors.YELLOW}•{Colors.RESET} {violation}")
                print()
            return

        guide = self._load_guide()
        failures = 0

        for section in guide.sections:
            bad = {v.principle for v in detect_in_module(section.bad.module)}
            good = {v.principle for v in detect_in_module(section.good.module)}

            print(f"{Colors.BOLD}{section.acronym}{Colors.RESET} {section.name}")

            if section.acronym in bad:
                print(f"  {Colors.GREEN}✓{Colors.RESET} bad example violates {section.acronym}")
            else:
                failures += 1
                print(f"  {Colors.RED}✗{Colors.RESET} bad example does not violate {section.acronym}")

            if not good:
                print(f"  {Colors.GREEN}✓{Colors.RESET} good example is clean")
            else:
                failures += 1
                print(f"  {Colors.RED}✗{Colors.RESET} good example violates {', '.join(sorted(good))}")

        print()
        if failures:
            print(f"{Colors.RED}✗ {failures} check(s) failed{Colors.RESET}")
            sys.exit(1)
        print(f"{Colors.GREEN}✓ Every contrast pair demonstrates its principle{Colors.RESET}")

    def _load_guide(self) -> Guide:
        if self.config.content_path:
            return load_guide(str(self._resolve(self.config.content_path)))
        return load_guide()

    def _resolve(self, path: str) -> Path:
        candidate = Path(path)
        return candidate if candidate.is_absolute() else self.repo_root / candidate


def main(argv: Optional[List[str]] = None):
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="SOLID guide - render, validate and check the SOLID principles guide",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('--root', default='.', help='Repository root (default: current directory)')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('init', help='Write the default configuration')
    subparsers.add_parser('list', help='List the principles')

    show_parser = subparsers.add_parser('show', help='Print one principle section')
    show_parser.add_argument('key', help='Principle key or acronym, e.g. srp')

    render_parser = subparsers.add_parser('render', help='Render the guide to Markdown')
    render_parser.add_argument('--output', '-o', help='Output path (default: configured output_path)')

    validate_parser = subparsers.add_parser('validate', help='Validate a Markdown guide')
    validate_parser.add_argument('path', nargs='?', help='Markdown file (default: configured output_path)')

    check_parser = subparsers.add_parser('check', help='Check example modules for violations')
    check_parser.add_argument('modules', nargs='*', help='Modules to inspect (omit to check the whole guide)')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s"
    )

    if not args.command:
        parser.print_help()
        sys.exit(1)

    cli = GuideCLI(args.root)

    try:
        if args.command == 'init':
            cli.init()
        elif args.command == 'list':
            cli.list_principles()
        elif args.command == 'show':
            cli.show(args.key)
        elif args.command == 'render':
            cli.render(args.output)
        elif args.command == 'validate':
            cli.validate(args.path)
        elif args.command == 'check':
            cli.check(args.modules)
    except KeyboardInterrupt:
        print(f"\n{Colors.YELLOW}Operation cancelled{Colors.RESET}")
        sys.exit(130)
    except Exception as e:
        print(f"\n{Colors.RED}✗ Error: {str(e)}{Colors.RESET}")
        sys.exit(1)


if __name__ == '__main__':
    main()
