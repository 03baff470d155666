import pytest

from snakeplay.app import MenuChoice, main, menu_choice


@pytest.mark.parametrize(
    ("x", "y", "expected"),
    [
        (300, 230, MenuChoice.PLAY),
        (502, 267, MenuChoice.PLAY),
        (280, 350, MenuChoice.OBSTACLES),
        (400, 500, MenuChoice.HELP),
        (309, 589, MenuChoice.EXIT),
        (423, 647, MenuChoice.EXIT),
    ],
)
def test_buttons_are_found(x, y, expected):
    assert menu_choice(x, y) is expected


@pytest.mark.parametrize(
    ("x", "y"),
    [
        (287, 230),
        (503, 230),
        (300, 207),
        (300, 268),
        (400, 300),
        (100, 100),
        (308, 600),
        (424, 600),
    ],
)
def test_edges_and_gaps_choose_nothing(x, y):
    assert menu_choice(x, y) is None


def test_every_choice_has_a_button():
    points = [(300, 230), (300, 350), (300, 480), (350, 600)]
    assert {menu_choice(x, y) for x, y in points} == set(MenuChoice)


def test_help_option_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0


def test_bad_seed_is_rejected():
    with pytest.raises(SystemExit) as info:
        main(["--seed", "abc"])
    assert info.value.code == 2