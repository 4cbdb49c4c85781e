"""
Property-based tests for GuideConfig.

**Property 4: Saved configuration is reloaded unchanged**
**Property 5: Output paths are accepted only for Markdown files**
"""
from hypothesis import given, strategies as st, settings
from pathlib import Path
import tempfile
import shutil

from solidguide.guide_config import GuideConfig, load_config


# ============================================================================
# Hypothesis Strategies
# ============================================================================

@st.composite
def path_stem_strategy(draw):
    """Generate simple relative path stems."""
    parts = draw(st.lists(
        st.text(min_size=1, max_size=12, alphabet=st.characters(
            whitelist_categories=('Lu', 'Ll', 'Nd'),
            whitelist_characters='-_'
        )),
        min_size=1,
        max_size=3
    ))
    return "/".join(parts)


# ============================================================================
# Property 4: Configuration persistence
# ============================================================================

@given(
    stem=path_stem_strategy(),
    check_violations=st.booleans(),
    api_title=st.text(min_size=1, max_size=40)
)
@settings(max_examples=50)
def test_property_4_config_persistence(stem, check_violations, api_title):
    """
    **Property 4: Saved configuration is reloaded unchanged**

    For any valid settings, saving and loading yields the same values.
    """
    tmp_dir = Path(tempfile.mkdtemp())
    try:
        config_path = str(tmp_dir / "settings" / "guide.json")
        original = GuideConfig(
            content_path=f"{stem}.yaml",
            output_path=f"{stem}.md",
            check_violations=check_violations,
            api_title=api_title,
            config_path=config_path
        )
        original.save()

        loaded = load_config(config_path)

        assert loaded == original
        assert loaded.validate() == []
    finally:
        shutil.rmtree(tmp_dir, ignore_errors=True)


# ============================================================================
# Property 5: Output path validation
# ============================================================================

@given(
    stem=path_stem_strategy(),
    extension=st.sampled_from(['.txt', '.html', '.rst', '.yaml', ''])
)
@settings(max_examples=50)
def test_property_5_output_must_be_markdown(stem, extension):
    """
    **Property 5: Output paths are accepted only for Markdown files**

    For any output path without a .md extension, validation reports it.
    """
    config = GuideConfig(output_path=f"{stem}{extension}")

    assert f"output_path must be a Markdown file: {stem}{extension}" in config.validate()
