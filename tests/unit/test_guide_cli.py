"""
Unit tests for the guide CLI.
"""
import json
import pytest
import tempfile
import shutil
from pathlib import Path

from solidguide.guide_cli import GuideCLI, main
from solidguide.guide_config import GuideConfig


@pytest.fixture
def temp_repo():
    """Create a temporary repository root."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


class TestGuideCLI:
    """Tests for GuideCLI class."""

    def test_init_writes_config(self, temp_repo, capsys):
        """Test init creates the settings file."""
        GuideCLI(str(temp_repo)).init()

        assert (temp_repo / ".solidguide/settings/guide.json").exists()
        assert "Settings written" in capsys.readouterr().out

    def test_init_twice(self, temp_repo, capsys):
        """Test a second init leaves the existing file alone."""
        GuideCLI(str(temp_repo)).init()
        GuideCLI(str(temp_repo)).init()

        assert "Already initialized" in capsys.readouterr().out

    def test_list_principles(self, temp_repo, capsys):
        """Test list prints all five principles in order."""
        GuideCLI(str(temp_repo)).list_principles()

        out = capsys.readouterr().out
        positions = [out.index(acronym) for acronym in ["SRP", "OCP", "LSP", "ISP", "DIP"]]
        assert positions == sorted(positions)
        assert "Clients should not be forced to depend on methods they do not use." in out

    def test_show_section(self, temp_repo, capsys):
        """Test show prints the rendered section."""
        GuideCLI(str(temp_repo)).show("isp")

        out = capsys.readouterr().out
        assert out.startswith("## 4. Interface Segregation Principle (ISP)")
        assert "class RobotWorker(Workable):" in out

    def test_show_unknown(self, temp_repo, capsys):
        """Test show exits with an error for unknown principles."""
        with pytest.raises(SystemExit) as exc_info:
            GuideCLI(str(temp_repo)).show("dry")

        assert exc_info.value.code == 1
        assert "Unknown principle: dry" in capsys.readouterr().out

    def test_render_then_validate(self, temp_repo, capsys):
        """Test rendering to the configured output then validating it."""
        cli = GuideCLI(str(temp_repo))
        cli.render()

        output = temp_repo / "docs" / "SOLID.md"
        assert output.exists()

        cli.validate()
        assert "has the expected guide structure" in capsys.readouterr().out

    def test_render_custom_output(self, temp_repo):
        """Test render honours an explicit output path."""
        GuideCLI(str(temp_repo)).render("build/guide.md")

        assert (temp_repo / "build" / "guide.md").exists()

    def test_render_invalid_content(self, temp_repo, capsys):
        """Test render refuses invalid guide content."""
        content = temp_repo / "guide.yaml"
        content.write_text(
            "title: Broken\n"
            "sections: []\n"
            "benefits: []\n",
            encoding='utf-8'
        )
        GuideConfig(content_path="guide.yaml", config_path=str(temp_repo / ".solidguide/settings/guide.json")).save()

        with pytest.raises(SystemExit):
            GuideCLI(str(temp_repo)).render()

        assert "Guide content is invalid" in capsys.readouterr().out

    def test_validate_broken_document(self, temp_repo, capsys):
        """Test validate exits with status 1 on structural errors."""
        document = temp_repo / "broken.md"
        document.write_text("# Guide\n\n## Summary\n", encoding='utf-8')

        with pytest.raises(SystemExit) as exc_info:
            GuideCLI(str(temp_repo)).validate("broken.md")

        assert exc_info.value.code == 1
        out = capsys.readouterr().out
        assert "missing_section" in out
        assert "structural error(s)" in out

    def test_invalid_config_exits(self, temp_repo, capsys):
        """Test a config with a non-boolean check_violations is rejected."""
        config_path = temp_repo / ".solidguide/settings/guide.json"
        config_path.parent.mkdir(parents=True)
        config_path.write_text(json.dumps({"guide": {"check_violations": "no"}}), encoding='utf-8')

        with pytest.raises(SystemExit) as exc_info:
            GuideCLI(str(temp_repo))

        assert exc_info.value.code == 1
        out = capsys.readouterr().out
        assert "Invalid configuration" in out
        assert "check_violations must be true or false" in out

    def test_check_guide(self, temp_repo, capsys):
        """Test check passes for the bundled examples."""
        GuideCLI(str(temp_repo)).check()

        out = capsys.readouterr().out
        assert "bad example violates SRP" in out
        assert "Every contrast pair demonstrates its principle" in out

    def test_check_explicit_modules(self, temp_repo, capsys):
        """Test check prints violations for named modules."""
        GuideCLI(str(temp_repo)).check([
            "solidguide.principles.violations.dip",
            "solidguide.principles.compliant.dip"
        ])

        out = capsys.readouterr().out
        assert "DIP UserService.__init__" in out
        assert "No violations" in out


class TestMain:
    """Tests for the argparse entry point."""

    def test_no_command_prints_help(self, capsys):
        """Test running without a command exits with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 1
        assert "Available commands" in capsys.readouterr().out

    def test_list_command(self, temp_repo, capsys):
        """Test the list command runs end to end."""
        main(["--root", str(temp_repo), "list"])

        assert "Single Responsibility Principle" in capsys.readouterr().out

    def test_errors_exit_with_status_1(self, temp_repo, capsys):
        """Test unexpected errors are reported and exit with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--root", str(temp_repo), "validate", "missing.md"])

        assert exc_info.value.code == 1
        assert "Guide document not found" in capsys.readouterr().out

    def test_keyboard_interrupt_exits_with_130(self, temp_repo, capsys, monkeypatch):
        """Test Ctrl-C is reported as a cancelled operation."""
        def interrupted(self):
            raise KeyboardInterrupt

        monkeypatch.setattr(GuideCLI, "list_principles", interrupted)

        with pytest.raises(SystemExit) as exc_info:
            main(["--root", str(temp_repo), "list"])

        assert exc_info.value.code == 130
        assert "Operation cancelled" in capsys.readouterr().out
