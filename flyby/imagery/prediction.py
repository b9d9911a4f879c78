from collections.abc import Sequence
from datetime import datetime, timedelta, timezone

from flyby.errors.prediction_errors import InsufficientDataError
from flyby.logging import get_logger
from flyby.types.imagery import CaptureRecord

logger = get_logger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def _to_millis(moment: datetime) -> int:
    # Catalog dates usually come without an offset; they are UTC
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return (moment - _EPOCH) // _ONE_MS


def _from_millis(millis: int) -> datetime:
    return _EPOCH + timedelta(milliseconds=millis)


def capture_instants(records: Sequence[CaptureRecord]) -> list[int]:
    """Return the capture times as ascending milliseconds since the Unix epoch."""
    return sorted(_to_millis(record.date) for record in records)


def _mean_interval_millis(instants: list[int]) -> int:
    if len(instants) < 2:
        raise InsufficientDataError(len(instants))

    intervals = [later - earlier for earlier, later in zip(instants, instants[1:])]
    # Intervals are non-negative, so floor division truncates
    return sum(intervals) // len(intervals)


def mean_capture_interval(records: Sequence[CaptureRecord]) -> timedelta:
    """Average time between chronologically consecutive captures.

    Raises:
        InsufficientDataError: If fewer than two records are given.
    """
    return timedelta(milliseconds=_mean_interval_millis(capture_instants(records)))


def predict_next_capture(records: Sequence[CaptureRecord]) -> datetime:
    """Predict when the next image will be captured.

    The records are ordered by capture time, the mean gap between consecutive
    captures is computed in whole milliseconds, and that gap is added to the
    most recent capture. Input order does not matter and duplicate timestamps
    count as zero-length gaps.

    Args:
        records: Historical captures for a single location, in any order.

    Returns:
        The predicted capture time as a timezone-aware UTC datetime.

    Raises:
        InsufficientDataError: If fewer than two records are given.
    """
    instants = capture_instants(records)
    mean_millis = _mean_interval_millis(instants)
    logger.debug(
        f"Mean interval over {len(instants)} captures: "
        f"{timedelta(milliseconds=mean_millis)}"
    )
    return _from_millis(instants[-1] + mean_millis)
