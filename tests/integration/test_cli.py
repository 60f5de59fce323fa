"""End-to-end tests for the ``radnt`` command line (radnt.cli).

Each test runs ``main()`` in-process against a temporary project directory.
No network access is needed; the PyPI check is patched out.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from radnt.cli import build_parser, main

pytestmark = pytest.mark.integration


@pytest.fixture(autouse=True)
def _clean_env():
    with patch.dict(os.environ, {}, clear=False):
        for key in [k for k in os.environ if k.startswith("RADNT_")]:
            del os.environ[key]
        yield


class TestParser:
    def test_add_arguments(self):
        args = build_parser().parse_args(["add", "alert"])
        assert args.command == "add"
        assert args.component == "alert"
        assert args.add_all is False

    def test_add_all(self):
        args = build_parser().parse_args(["add", "--all"])
        assert args.component is None
        assert args.add_all is True

    def test_init_options(self):
        args = build_parser().parse_args(["init", "--style", "new-york", "--base-color", "zinc", "-y"])
        assert (args.style, args.base_color, args.yes, args.css_variables) == ("new-york", "zinc", True, True)

    def test_invalid_style(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["init", "--style", "fancy"])


class TestMain:
    def test_no_command_prints_help(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "usage: radnt" in capsys.readouterr().out

    def test_init_then_add(self, next_project: Path, capsys):
        main(["-C", str(next_project), "init", "--yes"])
        assert (next_project / "components.json").is_file()

        main(["-C", str(next_project), "add", "acordion"])

        assert (next_project / "components" / "ui" / "accordion.tsx").is_file()
        out = capsys.readouterr().out
        assert 'Did you mean "accordion"?' in out
        assert 'import { Accordion } from "@/components/ui/accordion"' in out

    def test_add_without_init_exits_1(self, next_project: Path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["-C", str(next_project), "add", "alert"])
        assert exc_info.value.code == 1
        assert 'Run "radnt init" first.' in capsys.readouterr().out

    def test_add_unimplemented_exits_1(self, initialized_project: Path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["-C", str(initialized_project), "add", "calendar"])
        assert exc_info.value.code == 1
        assert "Component calendar is not implemented yet" in capsys.readouterr().out

    def test_add_unknown_exits_0(self, initialized_project: Path, capsys):
        main(["-C", str(initialized_project), "add", "xyz123"])
        assert "Available components:" in capsys.readouterr().out

    def test_init_outside_project_exits_1(self, tmp_path: Path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["-C", str(tmp_path), "init", "--yes"])
        assert exc_info.value.code == 1
        assert "No package.json found" in capsys.readouterr().out

    def test_project_dir_from_env(self, initialized_project: Path):
        with patch.dict(os.environ, {"RADNT_PROJECT_DIR": str(initialized_project)}):
            main(["add", "badge"])
        assert (initialized_project / "components" / "ui" / "badge.tsx").is_file()

    def test_version(self, capsys):
        with patch("radnt.cli.get_current_version", return_value="1.2.0"), \
                patch("radnt.cli.check_for_updates", new=AsyncMock(return_value=None)) as check:
            main(["version"])
        check.assert_awaited_once()
        assert "Radnt CLI v1.2.0" in capsys.readouterr().out

    def test_init_writes_valid_json(self, next_project: Path):
        main(["-C", str(next_project), "init", "-y", "--style", "new-york", "--no-css-variables"])
        data = json.loads((next_project / "components.json").read_text(encoding="utf-8"))
        assert data["style"] == "new-york"
        assert data["cssVariables"] is False

    def test_add_query_with_markup(self, initialized_project: Path, capsys):
        main(["-C", str(initialized_project), "add", "[/]"])
        out = capsys.readouterr().out
        assert 'Component "[/]" not found.' in out
        assert "Available components:" in out

    def test_error_message_with_brackets(self, tmp_path: Path, capsys):
        project = tmp_path / "[app]"
        project.mkdir()
        with pytest.raises(SystemExit) as exc_info:
            main(["-C", str(project), "init", "--yes"])
        assert exc_info.value.code == 1
        assert "[app]" in capsys.readouterr().out.replace("\n", "")

    def test_malformed_components_json_exits_1(self, initialized_project: Path, capsys):
        (initialized_project / "components.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main(["-C", str(initialized_project), "add", "alert"])
        assert exc_info.value.code == 1
        assert "Invalid components.json" in capsys.readouterr().out

    def test_malformed_package_json_exits_1(self, next_project: Path, capsys):
        (next_project / "package.json").write_text("{", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main(["-C", str(next_project), "init", "--yes"])
        assert exc_info.value.code == 1
        assert "Invalid package.json" in capsys.readouterr().out

    def test_not_next_project_hint(self, tmp_path: Path, capsys):
        (tmp_path / "package.json").write_text("{}", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main(["-C", str(tmp_path), "init", "--yes"])
        assert exc_info.value.code == 1
        out = capsys.readouterr().out
        assert "create-next-app" in out
        assert "radnt create" not in out

    @pytest.mark.parametrize("timeout", ["0", "soon"])
    def test_invalid_timeout_env_exits_1(self, timeout: str, capsys):
        with patch.dict(os.environ, {"RADNT_UPDATE_TIMEOUT": timeout}):
            with pytest.raises(SystemExit) as exc_info:
                main(["version"])
        assert exc_info.value.code == 1
        assert "Invalid configuration" in capsys.readouterr().out
