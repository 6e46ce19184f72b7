import pytest

from falling_pixels.main import build_parser, main


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert (args.width, args.height) == (58, 30)
    assert args.mode == "window"
    assert args.seed is None
    assert not args.legacy_shuffle


def test_parser_accepts_hex_seed():
    assert build_parser().parse_args(["--seed", "0xff"]).seed == 255


@pytest.mark.parametrize("seed", ["-1", "18446744073709551616", "abc"])
def test_parser_rejects_bad_seed(seed):
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--seed", seed])


def test_dump_first_and_last_frame(capsys):
    assert main(["--mode", "dump", "--width", "3", "--height", "2", "--seed", "1"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "seed=1 step=0/8"
    assert out[1:3] == ["###", "###"]
    assert out[3] == "dark cells: 0/6"

    main(["--mode", "dump", "--width", "3", "--height", "2", "--seed", "1", "--step", "99"])
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "seed=1 step=8/8"
    assert out[1:3] == ["...", "..."]


def test_dump_rejects_empty_grid():
    with pytest.raises(SystemExit):
        main(["--mode", "dump", "--width", "0"])


@pytest.mark.parametrize("cell_size", ["0", "-3"])
def test_rejects_bad_cell_size(cell_size):
    with pytest.raises(SystemExit) as excinfo:
        main(["--cell-size", cell_size, "--seed", "1"])
    assert excinfo.value.code == 2
