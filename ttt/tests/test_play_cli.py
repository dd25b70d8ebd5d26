import pytest
from ttt.config import PlayConfig, load_config_from_yaml
from ttt.scripts.play_cli import main


def _blocks(out: str, separator: str = "-" * 10):
    """Split CLI output into board blocks (3 lines each)."""
    lines = out.splitlines()
    blocks, cur = [], []
    for line in lines:
        if line == separator:
            blocks.append(cur)
            cur = []
        else:
            cur.append(line)
    return blocks, cur


def test_no_args_prints_boards_and_exits_zero(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    blocks, trailing = _blocks(out)

    assert trailing == [], "default output ends with a separator"
    assert blocks[0] == ["|     |"] * 3
    assert 6 <= len(blocks) <= 10  # initial board + 5..9 moves
    for block in blocks:
        assert len(block) == 3
        for row in block:
            assert len(row) == 7 and row[0] == "|" and row[-1] == "|"
            assert set(row[1::2]) <= {" ", "X", "O"}


def test_seed_gives_identical_output(capsys):
    main(["--seed", "123"])
    first = capsys.readouterr().out
    main(["--seed", "123"])
    assert capsys.readouterr().out == first


def test_summary_flag(capsys):
    main(["--seed", "1", "--summary"])
    last = capsys.readouterr().out.splitlines()[-1]
    assert last.startswith("Draw in ") or " wins in " in last


def test_config_file_sets_seed_and_summary(tmp_path, capsys):
    cfg = tmp_path / "play.yaml"
    cfg.write_text("seed: 4\nshow_summary: true\n")
    assert main(["--config", str(cfg)]) == 0
    from_file = capsys.readouterr().out
    main(["--seed", "4", "--summary"])
    assert capsys.readouterr().out == from_file

    blocks, trailing = _blocks(from_file)
    assert blocks[0] == ["|     |"] * 3
    assert len(trailing) == 1 and " in " in trailing[0]


def test_config_cannot_change_separator(tmp_path, capsys):
    cfg = tmp_path / "sep.yaml"
    cfg.write_text("seed: 4\nseparator: '=='\n")
    with pytest.raises(TypeError):
        main(["--config", str(cfg)])
    assert "==" not in capsys.readouterr().out.splitlines()


def test_load_config_defaults_and_values(tmp_path):
    empty = tmp_path / "empty.yaml"
    empty.write_text("")
    assert load_config_from_yaml(str(empty)) == PlayConfig()

    full = tmp_path / "full.yaml"
    full.write_text("seed: 9\nshow_summary: true\n")
    cfg = load_config_from_yaml(str(full))
    assert cfg.seed == 9 and cfg.show_summary is True


def test_load_config_rejects_bad_files(tmp_path):
    unknown = tmp_path / "unknown.yaml"
    unknown.write_text("players: 3\n")
    with pytest.raises(TypeError):
        load_config_from_yaml(str(unknown))

    listy = tmp_path / "list.yaml"
    listy.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_config_from_yaml(str(listy))
