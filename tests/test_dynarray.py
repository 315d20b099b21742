import pytest

from algostudy.dynarray import DynamicArray, main


def _feed(monkeypatch, answers):
    it = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_render_marks_unused_slots():
    assert DynamicArray(4, [1, 2]).render() == "1 2 _ _"


def test_len_and_iter_follow_items():
    array = DynamicArray(5, [7, 8, 9])
    assert len(array) == 3
    assert list(array) == [7, 8, 9]
    assert array.capacity == 5


def test_too_many_items_rejected():
    with pytest.raises(ValueError):
        DynamicArray(1, [1, 2])


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        DynamicArray(-1)


def test_append_within_capacity_keeps_capacity():
    array = DynamicArray(3, [1])
    array.append(2)
    assert array.capacity == 3
    assert list(array) == [1, 2]


def test_append_when_full_doubles_capacity():
    array = DynamicArray(2, [1, 2])
    array.append(3)
    assert array.capacity == 2 * 2
    assert list(array) == [1, 2, 3]


def test_append_to_zero_capacity_grows():
    array = DynamicArray(0)
    array.append(5)
    assert list(array) == [5]
    assert array.capacity >= len(array)


def test_remove_head_without_shrink():
    array = DynamicArray(6, [1, 2, 3, 4])
    assert array.remove_head() == 1
    assert list(array) == [2, 3, 4]
    assert array.capacity == 6


def test_remove_head_shrinks_to_a_third():
    array = DynamicArray(6, [1, 2, 3])
    array.remove_head()
    assert list(array) == [2, 3]
    assert array.capacity == 6 // 3


def test_remove_last_keeps_one_slot():
    array = DynamicArray(2, [4])
    array.remove_head()
    assert len(array) == 0
    assert array.capacity == 1
    assert array.render() == "_"


def test_remove_from_empty_raises():
    with pytest.raises(IndexError):
        DynamicArray(3).remove_head()


def test_capacity_always_holds_items():
    array = DynamicArray(1)
    for value in range(1, 20):
        array.append(value)
        assert array.capacity >= len(array)
    while len(array):
        array.remove_head()
        assert array.capacity >= len(array)


def test_main_print_stage_reprompts_on_bad_size(monkeypatch, capsys):
    _feed(monkeypatch, ["2", "3", "1", "9"])
    assert main(["print"]) == 0
    out = capsys.readouterr().out
    assert "Ошибка! Логический размер массива не может превышать фактический!" in out
    assert "Динамический массив: 9 _" in out


def test_main_full_session(monkeypatch, capsys):
    _feed(monkeypatch, ["2", "2", "1", "2", "3", "0", "да", "может", "нет"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Спасибо! Ваш массив: 1 2 3 _" in out
    assert "Пожалуйста, введите 'да' или 'нет'." in out
    assert "Спасибо! Ваш динамический массив: 2 3 _ _" in out


def test_main_remove_until_empty(monkeypatch, capsys):
    _feed(monkeypatch, ["1", "1", "4", "0", "да", "да"])
    assert main(["remove"]) == 0
    out = capsys.readouterr().out
    assert "Невозможно удалить первый элемент" in out