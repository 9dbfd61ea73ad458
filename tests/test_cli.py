from pathlib import Path

from click.testing import CliRunner

from slicetree.cli import cli


def make_paths(folder: Path):
    return [str(folder / name) for name in ("out1.txt", "out2.txt", "out3.txt")]


def test_cli_run(tmp_path: Path):
    in_file = tmp_path / "in.txt"
    in_file.write_text("1(2,3)\n2(4,1)\nV\n")
    outputs = make_paths(tmp_path)
    runner = CliRunner()
    result = runner.invoke(cli, [str(in_file), *outputs])
    assert result.exit_code == 0, result.output
    assert "Placed 2 blocks in a 6 x 3 floorplan" in result.output
    assert Path(outputs[0]).read_text() == "V\n1(2,3)\n2(4,1)\n"
    assert Path(outputs[1]).read_text() == "1(2,3)\n2(4,1)\nV(6,3)\n"
    assert Path(outputs[2]).read_text() == "1((2,3)(0,0))\n2((4,1)(2,0))\n"


def test_cli_argument_count(tmp_path: Path):
    in_file = tmp_path / "in.txt"
    in_file.write_text("1(2,3)\n")
    runner = CliRunner()
    for args in [[], [str(in_file)], [str(in_file), *make_paths(tmp_path)[:2]]]:
        result = runner.invoke(cli, args)
        assert result.exit_code == 2
        assert "Usage" in result.output
    too_many = [str(in_file), *make_paths(tmp_path), str(tmp_path / "extra.txt")]
    result = runner.invoke(cli, too_many)
    assert result.exit_code == 2
    assert not any(Path(p).exists() for p in make_paths(tmp_path))


def test_cli_missing_input(tmp_path: Path):
    runner = CliRunner()
    result = runner.invoke(cli, [str(tmp_path / "nope.txt"), *make_paths(tmp_path)])
    assert result.exit_code != 0
    assert not any(Path(p).exists() for p in make_paths(tmp_path))


def test_cli_invalid_input(tmp_path: Path):
    runner = CliRunner()
    for text in ["H\n1(1,1)\n2(1,1)\n", "1(1,1)\n2(1,1)\n", "1(x,1)\n", "\n"]:
        in_file = tmp_path / "in.txt"
        in_file.write_text(text)
        result = runner.invoke(cli, [str(in_file), *make_paths(tmp_path)])
        assert result.exit_code == 1
        assert "Invalid input" in result.output
        assert not any(Path(p).exists() for p in make_paths(tmp_path))


def test_cli_unwritable_output(tmp_path: Path):
    in_file = tmp_path / "in.txt"
    in_file.write_text("1(2,3)\n")
    outputs = make_paths(tmp_path)
    outputs[2] = str(tmp_path / "missing" / "out3.txt")
    result = CliRunner().invoke(cli, [str(in_file), *outputs])
    assert result.exit_code == 1
    assert "Cannot read or write files" in result.output
    assert not Path(outputs[0]).exists()
    assert not Path(outputs[1]).exists()
