"""Tests for touchkit.timestamps."""

import datetime
import logging
import os

from touchkit import timestamps, timetools
from touchkit.timestamps import NOW, REFERENCE, STAMP, TimestampPair, resolve_timestamp_pair


def _local_ns(*fields):
    return int(datetime.datetime(*fields).timestamp()) * 10**9


class TestNow:
    """With no reference and no stamp, both times are the given now."""

    def test_uses_now(self, fixed_now):
        pair = resolve_timestamp_pair(now=fixed_now)
        assert pair.access == _local_ns(2024, 6, 15, 12, 0, 0)
        assert pair.modification == pair.access
        assert pair.source is NOW

    def test_aware_now(self):
        now = datetime.datetime(2001, 9, 9, 1, 46, 40, tzinfo=datetime.timezone.utc)
        pair = resolve_timestamp_pair(now=now)
        assert pair.access == 1_000_000_000 * 10**9

    def test_microseconds_survive(self):
        now = datetime.datetime(2001, 9, 9, 1, 46, 40, 250_000, tzinfo=datetime.timezone.utc)
        pair = resolve_timestamp_pair(now=now)
        assert pair.access == 1_000_000_000 * 10**9 + 250_000_000

    def test_reads_clock_when_now_omitted(self):
        before = timetools.to_nanoseconds(timetools.now())
        pair = resolve_timestamp_pair()
        after = timetools.to_nanoseconds(timetools.now())
        assert before <= pair.access <= after


class TestStamp:
    """A stamp string sets both times to the same local time."""

    def test_full_stamp(self, fixed_now):
        pair = resolve_timestamp_pair(stamp="201302020230.45", now=fixed_now)
        expected = _local_ns(2013, 2, 2, 2, 30, 45)
        assert pair == TimestampPair(expected, expected)
        assert pair.source is STAMP

    def test_short_stamp_takes_year_from_now(self, fixed_now):
        pair = resolve_timestamp_pair(stamp="06151230", now=fixed_now)
        assert pair.access == _local_ns(2024, 6, 15, 12, 30, 0)

    def test_empty_stamp_is_still_a_stamp(self, fixed_now):
        pair = resolve_timestamp_pair(stamp="", now=fixed_now)
        assert pair.source is STAMP
        assert pair.access == _local_ns(2024, 1, 1, 0, 0, 0)

    def test_unrepresentable_stamp_falls_back_to_now(self, fixed_now, monkeypatch, caplog):
        real = timetools.to_nanoseconds

        def overflow_in_9999(moment):
            if moment.year == 9999:
                raise OverflowError("date value out of range")
            return real(moment)

        monkeypatch.setattr(timestamps.timetools, "to_nanoseconds", overflow_in_9999)
        with caplog.at_level(logging.WARNING):
            pair = resolve_timestamp_pair(stamp="999912312359", now=fixed_now)
        assert pair.source is NOW
        assert pair.access == _local_ns(2024, 6, 15, 12, 0, 0)
        assert "can't be used" in caplog.text


class TestReference:
    """A usable reference file wins over everything else."""

    def test_copies_times_exactly(self, reference_file, fixed_now):
        stat = os.stat(reference_file)
        pair = resolve_timestamp_pair(reference=str(reference_file), now=fixed_now)
        assert pair.access == stat.st_atime_ns
        assert pair.modification == stat.st_mtime_ns
        assert pair.access != pair.modification
        assert pair.source is REFERENCE

    def test_wins_over_stamp(self, reference_file, fixed_now):
        pair = resolve_timestamp_pair(
            reference=str(reference_file),
            stamp="201302020230.45",
            now=fixed_now,
        )
        assert pair.source is REFERENCE

    def test_missing_reference_falls_through_to_stamp(self, tmp_path, fixed_now):
        pair = resolve_timestamp_pair(
            reference=str(tmp_path / "missing"),
            stamp="201302020230.45",
            now=fixed_now,
        )
        assert pair.source is STAMP
        assert pair.access == _local_ns(2013, 2, 2, 2, 30, 45)

    def test_missing_reference_falls_through_to_now(self, tmp_path, fixed_now, caplog):
        with caplog.at_level(logging.DEBUG):
            pair = resolve_timestamp_pair(reference=str(tmp_path / "missing"), now=fixed_now)
        assert pair.source is NOW
        assert "Ignoring reference" in caplog.text
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]

    def test_empty_reference_is_no_reference(self, fixed_now):
        pair = resolve_timestamp_pair(reference="", now=fixed_now)
        assert pair.source is NOW

    def test_accepts_path_objects(self, reference_file, fixed_now):
        pair = resolve_timestamp_pair(reference=reference_file, now=fixed_now)
        assert pair.source is REFERENCE


class TestTimestampPair:
    def test_equality_ignores_source(self):
        assert TimestampPair(1, 2, source=NOW) == TimestampPair(1, 2, source=STAMP)

    def test_inequality(self):
        assert TimestampPair(1, 2) != TimestampPair(2, 1)

    def test_unpacks(self):
        (access, modification) = TimestampPair(1, 2)
        assert (access, modification) == (1, 2)

    def test_hashable(self):
        assert len({TimestampPair(1, 2), TimestampPair(1, 2, source=STAMP)}) == 1

    def test_repr_names_source(self):
        assert "STAMP" in repr(TimestampPair(1, 2, source=STAMP))

    def test_from_datetime(self):
        moment = datetime.datetime(1970, 1, 1, 0, 0, 1, tzinfo=datetime.timezone.utc)
        assert TimestampPair.from_datetime(moment) == TimestampPair(10**9, 10**9)
