import pytest

from scramble.cli import main

DEFINITION = """n: 3   // layers
d: 4
depth: 5
prefix: zy
postfix: yz
generators:
IU
"""

EXPECTED = """# Hyperspeedcube puzzle log
---
version: 1
puzzle:
  Rubiks4D:
    layer_count: 3
state: 1
twists: >
  zy IU IU IU IU IU yz
"""


@pytest.fixture
def definition_file(tmp_path):
    path = tmp_path / "puzzle.def"
    path.write_text(DEFINITION)
    return path


def test_writes_stdout(definition_file, capsys) -> None:
    assert main(["-i", str(definition_file)]) == 0

    assert capsys.readouterr().out == EXPECTED


def test_writes_output_file(definition_file, tmp_path, capsys) -> None:
    out = tmp_path / "scramble.hsc"

    assert main(["--input", str(definition_file), "--output", str(out)]) == 0

    assert out.read_text() == EXPECTED
    assert capsys.readouterr().out == ""


def test_settings_file_sets_app_name(definition_file, tmp_path, capsys) -> None:
    settings = tmp_path / "settings.yaml"
    settings.write_text("app_name: Cubes\n")

    assert main(["-i", str(definition_file), "--settings", str(settings)]) == 0

    assert capsys.readouterr().out.startswith("# Cubes puzzle log\n")


def test_parse_error_leaves_no_output(tmp_path) -> None:
    bad = tmp_path / "bad.def"
    bad.write_text("n: abc\n")
    out = tmp_path / "scramble.hsc"

    assert main(["-i", str(bad), "-o", str(out)]) == 1

    assert not out.exists()


def test_missing_input_fails(tmp_path) -> None:
    assert main(["-i", str(tmp_path / "nope.def")]) == 1


def test_unwritable_output_fails(definition_file, tmp_path) -> None:
    assert main(["-i", str(definition_file), "-o", str(tmp_path / "no" / "such" / "dir.hsc")]) == 1


def test_input_is_required() -> None:
    with pytest.raises(SystemExit) as exc:
        main([])

    assert exc.value.code == 2


def test_reads_and_writes_utf8(tmp_path) -> None:
    source = tmp_path / "prime.def"
    source.write_text(DEFINITION.replace("IU", "R′"), encoding="utf-8")
    out = tmp_path / "scramble.hsc"

    assert main(["-i", str(source), "-o", str(out)]) == 0

    assert out.read_text(encoding="utf-8").endswith("  zy R′ R′ R′ R′ R′ yz\n")


def test_verbose_run_succeeds(definition_file, capsys) -> None:
    assert main(["-i", str(definition_file), "-v"]) == 0

    assert capsys.readouterr().out == EXPECTED
