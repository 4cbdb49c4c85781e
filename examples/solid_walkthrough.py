"""
Example walking through the SOLID guide's contrast pairs.

This example shows how the runnable examples behave, what the violation
detector reports for each bad snippet, and how a broken guide document is
reported by the structure validator.
"""
from solidguide.guide_models import load_guide
from solidguide.principles.compliant import lsp as good_lsp
from solidguide.principles.violations import lsp as bad_lsp
from solidguide.renderer import render_guide
from solidguide.structure_validator import format_validation_report, validate_markdown
from solidguide.violation_detector import detect_in_module


def main():
    """Demonstrate the guide tooling."""
    guide = load_guide()

    print("=" * 60)
    print("Contrast pairs")
    print("=" * 60)
    for section in guide.sections:
        print(f"\n{section.acronym}: {section.statement}")
        for violation in detect_in_module(section.bad.module):
            print(f"  bad  -> {violation}")
        clean = not detect_in_module(section.good.module)
        print(f"  good -> {'no violations' if clean else 'VIOLATES'}")

    print("\n" + "=" * 60)
    print("Substituting birds")
    print("=" * 60)
    for bird in [good_lsp.Sparrow(), good_lsp.Penguin()]:
        print(f"  {type(bird).__name__}: {bird.eat()}")
    try:
        bad_lsp.Penguin().fly()
    except NotImplementedError as e:
        print(f"  bad Penguin.fly(): {e}")

    # Drop the DIP row from the summary table and validate the result
    markdown = render_guide(guide)
    broken = "\n".join(line for line in markdown.splitlines() if not line.startswith("| DIP |"))
    report = validate_markdown(broken, source="broken-guide.md")
    print(format_validation_report(report))


if __name__ == "__main__":
    main()
