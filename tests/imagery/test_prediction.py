from datetime import datetime, timedelta, timezone
from itertools import permutations

import pytest

from flyby.errors import InsufficientDataError
from flyby.imagery.prediction import (
    capture_instants,
    mean_capture_interval,
    predict_next_capture,
)
from flyby.types.imagery import CaptureRecord
from tests.utils import DAY_ZERO, create_records

UTC_DAY_ZERO = DAY_ZERO.replace(tzinfo=timezone.utc)


def day(n: float) -> datetime:
    return UTC_DAY_ZERO + timedelta(days=n)


@pytest.mark.parametrize(
    "days,expected_day",
    [
        ((0, 2, 4), 6),
        ((0, 1, 4), 6),
        ((0, 0), 0),
        ((0, 30), 60),
        ((10, 26, 42, 58), 74),
    ],
)
def test_predict_next_capture(days, expected_day):
    assert predict_next_capture(create_records(*days)) == day(expected_day)


@pytest.mark.parametrize("days", [(), (0,)])
def test_insufficient_data(days):
    with pytest.raises(InsufficientDataError) as exc_info:
        predict_next_capture(create_records(*days))
    assert exc_info.value.count == len(days)


def test_prediction_is_order_independent():
    records = create_records(0, 1, 4, 9, 9, 20)
    expected = predict_next_capture(records)
    for ordering in permutations(records):
        assert predict_next_capture(list(ordering)) == expected


def test_prediction_is_utc():
    prediction = predict_next_capture(create_records(0, 2))
    assert prediction.tzinfo is not None
    assert prediction.utcoffset() == timedelta(0)


def test_mean_is_truncated_to_whole_milliseconds():
    records = [
        CaptureRecord(date=DAY_ZERO),
        CaptureRecord(date=DAY_ZERO),
        CaptureRecord(date=DAY_ZERO + timedelta(milliseconds=1)),
    ]
    # intervals [0ms, 1ms] average to 0.5ms, truncated to 0
    assert mean_capture_interval(records) == timedelta(0)
    assert predict_next_capture(records) == UTC_DAY_ZERO + timedelta(milliseconds=1)


def test_sub_millisecond_precision_is_dropped():
    records = [
        CaptureRecord(date=DAY_ZERO),
        CaptureRecord(date=DAY_ZERO + timedelta(microseconds=1500)),
    ]
    assert capture_instants(records)[1] - capture_instants(records)[0] == 1


def test_mean_capture_interval():
    assert mean_capture_interval(create_records(0, 1, 4)) == timedelta(days=2)


def test_mean_capture_interval_insufficient_data():
    with pytest.raises(InsufficientDataError):
        mean_capture_interval(create_records(3))


def test_instants_sort_numerically():
    # 2001-09-09T01:46:40Z is 10**12 ms; one digit longer than the instant before
    boundary = datetime(2001, 9, 9, 1, 46, 40, tzinfo=timezone.utc)
    records = [
        CaptureRecord(date=boundary),
        CaptureRecord(date=boundary - timedelta(milliseconds=1)),
        CaptureRecord(date=datetime(1990, 1, 1, tzinfo=timezone.utc)),
    ]
    instants = capture_instants(records)
    assert instants == sorted(instants)
    assert instants[-2:] == [10**12 - 1, 10**12]


def test_offsets_are_respected():
    records = [
        CaptureRecord.model_validate({"date": "2024-01-01T02:00:00+02:00"}),
        CaptureRecord.model_validate({"date": "2024-01-03T00:00:00Z"}),
    ]
    assert predict_next_capture(records) == day(4)


def test_catalog_date_strings():
    records = [
        CaptureRecord.model_validate({"date": "2014-02-04T03:30:01.210000"}),
        CaptureRecord.model_validate({"date": "2014-02-20T03:30:01.210000"}),
        CaptureRecord.model_validate({"date": "2014-03-08T03:30:01.210000"}),
    ]
    assert predict_next_capture(records) == datetime(
        2014, 3, 24, 3, 30, 1, 210000, tzinfo=timezone.utc
    )
