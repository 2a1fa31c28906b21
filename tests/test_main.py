import io

import pytest

import main


def test_required_files_present():
    main.check_files_exist()


def test_missing_files_exit(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(main, "PROJECT_ROOT", tmp_path)
    with pytest.raises(SystemExit) as info:
        main.check_files_exist()
    assert info.value.code == 1
    assert "- config.json" in capsys.readouterr().out


def test_main_runs_console(monkeypatch):
    stdout = io.StringIO()
    monkeypatch.setattr("sys.stdin", io.StringIO("3 * (2 + 1)\n"))
    monkeypatch.setattr("sys.stdout", stdout)
    monkeypatch.setattr(main.config_manager, "load_setting_value",
                        lambda key: dict(main.config_manager.DEFAULT_SETTINGS))
    assert main.main() == 0
    assert stdout.getvalue() == ">> 9\n>> quitting...\n"
