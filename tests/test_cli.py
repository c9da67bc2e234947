import pytest

from idtemplate.cli import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "IDTEMPLATE_PREFIX",
        "IDTEMPLATE_TEMPLATE",
        "IDTEMPLATE_COUNT",
        "IDTEMPLATE_SEED",
        "IDTEMPLATE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_prints_first_candidate(capsys):
    code = main(["-T", "f:l", "-D", "f=John", "-D", "l=Smith"])

    assert code == 0
    assert capsys.readouterr().out.splitlines() == ["johnsmith"]


def test_prints_requested_number_of_candidates(capsys):
    code = main(["-T", "1f:l:N+", "-D", "f=Jo", "-D", "l=Lee", "-n", "3", "--seed", "1"])

    lines = capsys.readouterr().out.splitlines()
    assert code == 0
    assert lines[:2] == ["jlee", "olee"]
    assert len(lines) == 3
    assert lines[2].startswith("olee")


def test_stops_when_exhausted(capsys):
    code = main(["-T", "2f", "-D", "f=Ann", "-n", "10"])

    assert code == 0
    assert capsys.readouterr().out.splitlines() == ["an", "nn"]


def test_config_file(tmp_path, capsys):
    path = tmp_path / "config.yaml"
    path.write_text("template: 'l:=-=:f'\ndata:\n  f: Ann\n  l: Lee\n")

    code = main(["--config", str(path)])

    assert code == 0
    assert capsys.readouterr().out.splitlines() == ["lee-ann"]


def test_missing_template_exit_code():
    assert main(["-D", "f=Ann"]) == 176


def test_missing_data_exit_code():
    assert main(["-T", "f:l", "-D", "f=Ann"]) == 175


def test_syntax_error_exit_code():
    assert main(["-T", "f:=open"]) == 2


def test_malformed_data_argument(capsys):
    assert main(["-T", "f", "-D", "oops"]) == 2
    assert "KEY=VALUE" in capsys.readouterr().err


def test_empty_template_produces_nothing(capsys):
    assert main(["-T", ""]) == 1
    assert capsys.readouterr().out == ""


def test_invalid_count_is_a_configuration_error(capsys):
    assert main(["-T", "f", "-D", "f=Ann", "-n", "0"]) == 2
    assert "Count must be at least 1" in capsys.readouterr().err
