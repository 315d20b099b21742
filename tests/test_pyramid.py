import pytest

from algostudy.pyramid import (
    EXAMPLE,
    Command,
    NavigationError,
    PyramidNavigator,
    Side,
    calc_level,
    child_index,
    describe_node,
    main,
    parent_index,
    parse_command,
    pyramid_lines,
)


@pytest.mark.parametrize("index", range(40))
def test_calc_level_bounds(index):
    level = calc_level(index)
    assert 2**level <= index + 1 < 2 ** (level + 1)


def test_calc_level_root():
    assert calc_level(0) == 0


def test_calc_level_negative_rejected():
    with pytest.raises(ValueError):
        calc_level(-1)


def test_describe_root():
    assert describe_node(list(EXAMPLE), 0) == "0 root 16"


def test_describe_right_child():
    assert describe_node([16, 11, 9], 2) == "1 right(16) 9"


def test_pyramid_lines_one_per_node():
    lines = pyramid_lines(EXAMPLE)
    assert len(lines) == len(EXAMPLE)
    assert lines[0] == "0 root 16"
    assert all(line.endswith(f" {value}") for line, value in zip(lines, EXAMPLE))


@pytest.mark.parametrize("index", range(10))
@pytest.mark.parametrize("side", list(Side))
def test_child_parent_round_trip(index, side):
    child = child_index(index, len(EXAMPLE), side)
    if child is None:
        assert 2 * index + 1 >= len(EXAMPLE) or side is Side.RIGHT
    else:
        assert parent_index(child) == index


def test_children_differ_by_side():
    left = child_index(0, 3, Side.LEFT)
    right = child_index(0, 3, Side.RIGHT)
    assert left is not None and right is not None
    assert right == left + 1


def test_child_missing_past_end():
    assert child_index(0, 1, Side.LEFT) is None


def test_root_has_no_parent():
    assert parent_index(0) is None


@pytest.mark.parametrize(
    "text, command",
    [
        ("up", Command.UP),
        ("left", Command.LEFT),
        ("right", Command.RIGHT),
        ("exit", Command.EXIT),
        ("down", Command.UNKNOWN),
        ("", Command.UNKNOWN),
    ],
)
def test_parse_command(text, command):
    assert parse_command(text) is command


def test_navigator_moves_and_describes():
    nav = PyramidNavigator(EXAMPLE)
    assert nav.location() == "Вы находитесь здесь: 0 root 16"
    left = nav.move(Command.LEFT)
    assert nav.index == left
    assert nav.location().startswith("Вы находитесь здесь: 1 left(16)")
    assert nav.move(Command.UP) == 0


def test_navigator_up_from_root_fails():
    nav = PyramidNavigator(EXAMPLE)
    with pytest.raises(NavigationError, match="Отсутствует родитель"):
        nav.move(Command.UP)
    assert nav.index == 0


def test_navigator_missing_child():
    nav = PyramidNavigator([1, 2])
    with pytest.raises(NavigationError, match="правый потомок"):
        nav.move(Command.RIGHT)
    nav.move(Command.LEFT)
    with pytest.raises(NavigationError, match="левый потомок"):
        nav.move(Command.LEFT)


def test_navigator_unknown_command():
    nav = PyramidNavigator(EXAMPLE)
    with pytest.raises(ValueError, match="Неизвестная команда"):
        nav.move(Command.UNKNOWN)


def test_navigator_empty_rejected():
    with pytest.raises(ValueError):
        PyramidNavigator([])


def test_main_prints_pyramid(capsys):
    assert main(["1", "3", "6"]) == 0
    out = capsys.readouterr().out
    assert "Пирамида:" in out
    assert "0 root 1" in out


def test_main_walk(monkeypatch, capsys):
    answers = iter(["up", "left", "jump", "exit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main(["--walk"]) == 0
    out = capsys.readouterr().out
    assert "Ошибка! Отсутствует родитель" in out
    assert "Ок" in out
    assert "Неизвестная команда" in out