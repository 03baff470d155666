from snakeplay.score import POINTS_PER_FOOD, Score


def test_starts_at_zero(tmp_path):
    score = Score(tmp_path / "Score1.txt")
    assert score.points == 0
    assert score.best == 0


def test_add_accumulates(tmp_path):
    score = Score(tmp_path / "Score1.txt")
    assert score.add(POINTS_PER_FOOD) == POINTS_PER_FOOD
    assert score.add(POINTS_PER_FOOD) == 2 * POINTS_PER_FOOD
    assert score.points == 2 * POINTS_PER_FOOD


def test_update_best_saves_when_beaten(tmp_path):
    path = tmp_path / "Score2.txt"
    score = Score(path)
    score.add(POINTS_PER_FOOD)
    assert score.update_best() is True
    assert score.best == POINTS_PER_FOOD
    assert path.read_text(encoding="utf-8") == str(POINTS_PER_FOOD)


def test_update_best_no_change_when_not_beaten(tmp_path):
    path = tmp_path / "Score1.txt"
    score = Score(path)
    assert score.update_best() is False
    assert not path.exists()


def test_round_trip_through_file(tmp_path):
    path = tmp_path / "Score1.txt"
    first = Score(path)
    first.add(30)
    first.update_best()
    second = Score(path)
    assert second.load_best() == 30
    assert second.best == 30


def test_load_best_missing_file_keeps_value(tmp_path):
    score = Score(tmp_path / "missing.txt")
    assert score.load_best() == 0


def test_load_best_garbage_keeps_value(tmp_path):
    path = tmp_path / "Score1.txt"
    path.write_text("not a number", encoding="utf-8")
    score = Score(path)
    score.best = 40
    assert score.load_best() == 40


def test_load_best_reads_first_integer(tmp_path):
    path = tmp_path / "Score1.txt"
    path.write_text("  120\n", encoding="utf-8")
    assert Score(path).load_best() == 120