"""Tests for the ElasticRecognizer facade."""

import logging

import pytest

from digit_recognizer import ElasticRecognizer
from digit_recognizer.config.settings import RecognizerConfig
from digit_recognizer.errors import EmptyStroke, IndexOutOfRange, IngestionError
from digit_recognizer.utils.stroke_utils import Point

N = RecognizerConfig.STROKE_CAPACITY


def path(*pairs):
    return [{'x': x, 'y': y, 't': i} for i, (x, y) in enumerate(pairs)]


def test_capture_and_find_match(prototype_set):
    recognizer = ElasticRecognizer(prototype_set)
    for x, y in [(0, 0), (10, 1), (250, 0)]:
        assert recognizer.add_user_point(x, y)

    assert recognizer.num_user_points() == 3
    assert recognizer.get_user_point(1) == Point(10, 1)
    assert recognizer.find_match() == 0
    assert recognizer.num_user_points() == N


def test_reset_between_gestures(prototype_set):
    recognizer = ElasticRecognizer(prototype_set)
    recognizer.add_user_point(0, 0)
    recognizer.add_user_point(0, 300)
    assert recognizer.find_match() == 1

    recognizer.reset_user_stroke()
    assert recognizer.num_user_points() == 0
    recognizer.add_user_point(0, 0)
    recognizer.add_user_point(300, 0)
    assert recognizer.find_match() == 0


def test_points_beyond_capacity_are_dropped(prototype_set):
    recognizer = ElasticRecognizer(prototype_set)
    accepted = [recognizer.add_user_point(i, 0) for i in range(N + 10)]
    assert accepted.count(True) == N
    assert recognizer.num_user_points() == N


def test_get_user_point_out_of_range(prototype_set):
    recognizer = ElasticRecognizer(prototype_set)
    with pytest.raises(IndexOutOfRange):
        recognizer.get_user_point(0)


def test_find_match_on_empty_stroke(prototype_set):
    recognizer = ElasticRecognizer(prototype_set)
    with pytest.raises(EmptyStroke):
        recognizer.find_match()


def test_classify_path(prototype_set):
    recognizer = ElasticRecognizer(prototype_set)
    assert recognizer.classify_path(path((40, 40), (40, 90), (40, 200))) == 1
    assert recognizer.classify_path(path((10, 10), (60, 60), (200, 200))) == 2
    # The recognizer's own stroke is untouched
    assert recognizer.num_user_points() == 0


def test_classify_path_validates_input(prototype_set):
    recognizer = ElasticRecognizer(prototype_set)
    with pytest.raises(ValueError):
        recognizer.classify_path([{'x': 1}])
    with pytest.raises(ValueError):
        recognizer.classify_path("not a path")
    with pytest.raises(EmptyStroke):
        recognizer.classify_path([])


@pytest.mark.parametrize("x, y", [
    ('0', 5),
    (True, 5),
    (0, None),
    (float('inf'), 5),
    (0, float('nan')),
])
def test_classify_path_rejects_non_finite_or_non_numeric(prototype_set, x, y):
    recognizer = ElasticRecognizer(prototype_set)
    with pytest.raises(ValueError):
        recognizer.classify_path([{'x': 0, 'y': 0}, {'x': x, 'y': y}])


def test_add_user_point_rejects_bad_coordinates(prototype_set):
    recognizer = ElasticRecognizer(prototype_set)
    with pytest.raises(ValueError):
        recognizer.add_user_point(float('inf'), 0)
    with pytest.raises(ValueError):
        recognizer.add_user_point('3', 4)
    assert recognizer.num_user_points() == 0


def test_sessions_are_independent(prototype_set):
    recognizer = ElasticRecognizer(prototype_set)
    first = recognizer.new_session()
    second = recognizer.new_session()
    first.append(Point(0, 0))
    first.append(Point(250, 0))
    second.append(Point(0, 0))
    second.append(Point(0, 250))

    assert recognizer.recognize(first).label == 0
    assert recognizer.recognize(second).label == 1
    assert first.length() == N and second.length() == N
    assert recognizer.num_user_points() == 0


def test_loads_stroke_data_file(stroke_data_file):
    recognizer = ElasticRecognizer(stroke_data=str(stroke_data_file))
    assert recognizer.classify_path(path((5, 5), (5, 100))) == 1


def test_missing_stroke_data_file(tmp_path):
    with pytest.raises(IngestionError):
        ElasticRecognizer(stroke_data=str(tmp_path / 'missing.txt'))


def test_debug_file_records_classifications(tmp_path, prototype_set):
    log_path = tmp_path / 'recognizer_debug.log'
    recognizer = ElasticRecognizer(prototype_set, debug_file=str(log_path))
    recognizer.classify_path(path((0, 0), (250, 0)))
    recognizer.close()

    lines = log_path.read_text().splitlines()
    assert lines[0].startswith("Debug logging started")
    assert "label=0" in lines[1]


def test_classification_is_logged(caplog, prototype_set):
    recognizer = ElasticRecognizer(prototype_set)
    with caplog.at_level(logging.INFO, logger='digit_recognizer'):
        recognizer.classify_path(path((0, 0), (0, 250)))
    assert "Recognized digit 1" in caplog.text
