"""End-to-end tests for the command line."""

import json
import logging
import os

import pytest

from neovim_theme_generator.cli import main
from neovim_theme_generator.neovim import generate_neovim_theme
from neovim_theme_generator.themes import get_theme, theme_names


class TestStdout:
    def test_default_theme_goes_to_stdout(self, capsys) -> None:
        assert main([]) == 0
        captured = capsys.readouterr()
        assert captured.out == generate_neovim_theme(get_theme("syntark"))

    def test_selected_theme(self, capsys) -> None:
        main(["--theme", "thematic-light"])
        captured = capsys.readouterr()
        assert captured.out == generate_neovim_theme(get_theme("thematic-light"))

    def test_report_keeps_stdout_clean(self, capsys) -> None:
        main(["--report"])
        captured = capsys.readouterr()
        assert captured.out.startswith("local highlights = {\n")
        assert "READABILITY REPORT" not in captured.out
        assert "READABILITY REPORT" in captured.err

    def test_list(self, capsys) -> None:
        assert main(["--list"]) == 0
        assert capsys.readouterr().out.split() == theme_names()

    def test_unknown_theme_is_a_usage_error(self, capsys) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["--theme", "nope"])
        assert excinfo.value.code == 2
        assert "invalid choice" in capsys.readouterr().err


class TestFileOutput:
    def test_writes_module_and_palette(self, tmp_path, capsys) -> None:
        lua_path = tmp_path / "colors" / "thematic.lua"
        json_path = tmp_path / "palette.json"
        main([
            "--theme", "thematic-dark",
            "-o", str(lua_path),
            "--palette-json", str(json_path),
        ])
        assert lua_path.read_text() == generate_neovim_theme(get_theme("thematic-dark"))
        assert json.loads(json_path.read_text())["_theme"] == "thematic-dark"
        out = capsys.readouterr().out
        assert str(lua_path) in out
        assert str(json_path) in out

    def test_rerun_is_byte_identical(self, tmp_path) -> None:
        first, second = tmp_path / "a.lua", tmp_path / "b.lua"
        main(["-o", str(first)])
        main(["-o", str(second)])
        assert first.read_bytes() == second.read_bytes()



class TestVerbose:
    @pytest.fixture
    def package_logger(self):
        logger = logging.getLogger("neovim_theme_generator")
        level = logger.level
        yield logger
        for handler in logger.handlers:
            handler.setLevel(level)
        logger.setLevel(level)

    def test_verbose_after_quiet_run_enables_debug(self, package_logger) -> None:
        main([])
        assert package_logger.level == logging.WARNING
        main(["-v"])
        assert package_logger.level == logging.DEBUG
        assert all(h.level == logging.DEBUG for h in package_logger.handlers)


class TestPaletteJson:
    def test_failed_export_keeps_previous_file(self, tmp_path, monkeypatch) -> None:
        json_path = tmp_path / "palette.json"
        json_path.write_text("{}\n")

        def fail_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr("os.replace", fail_replace)
        with pytest.raises(OSError):
            main(["--palette-json", str(json_path)])
        assert json_path.read_text() == "{}\n"
        assert sorted(os.listdir(tmp_path)) == ["palette.json"]
