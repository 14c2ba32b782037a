"""Tests for the sorted-max and last-values reports."""

import io

import pytest

from bintally import WriteFailed, ingest_bytes
from bintally.ingest import Tally
from bintally.reports import (
    LAST_HEADER,
    SORTED_HEADER,
    render_reports,
    top_values,
    write_last_report,
    write_reports,
    write_sorted_report,
)


def tally_of(values: list[int]) -> Tally:
    tally = Tally()
    for value in values:
        tally.record(value)
    return tally


class BrokenSink:
    """Text sink whose writes start failing after ``ok_writes`` calls."""

    def __init__(self, ok_writes: int = 0):
        self.ok_writes = ok_writes
        self.lines: list[str] = []

    def write(self, text):
        if len(self.lines) >= self.ok_writes:
            raise OSError(28, "No space left on device")
        self.lines.append(text)
        return len(text)


class TestTopValues:
    """Tests for selecting the largest occurrences."""

    def test_empty(self):
        """Nothing ingested gives nothing to report."""
        tally = Tally()

        assert top_values(tally.frequencies, tally.max_seen) == []

    def test_descending_order(self):
        tally = tally_of([255, 3840])

        assert top_values(tally.frequencies, tally.max_seen) == [3840, 255]

    def test_fewer_than_limit_prints_all(self):
        """Under 32 occurrences every occurrence is reported."""
        values = [5, 1, 5, 9, 0, 9, 9]
        tally = tally_of(values)

        assert top_values(tally.frequencies, tally.max_seen) == sorted(values, reverse=True)

    def test_exactly_32(self):
        """32 occurrences are all reported."""
        values = list(range(32))
        tally = tally_of(values)

        assert top_values(tally.frequencies, tally.max_seen) == list(range(31, -1, -1))

    def test_exactly_33_drops_smallest(self):
        """With 33 occurrences the smallest one is left out."""
        values = list(range(33))
        tally = tally_of(values)

        result = top_values(tally.frequencies, tally.max_seen)

        assert len(result) == 32
        assert result == list(range(32, 0, -1))

    def test_single_bucket_over_limit(self):
        """One value with 40 occurrences prints 32 lines of it."""
        tally = tally_of([77] * 40)

        assert top_values(tally.frequencies, tally.max_seen) == [77] * 32

    def test_top_bucket_over_limit_hides_lower_values(self):
        """A top bucket that fills the report leaves no room below."""
        tally = tally_of([4095] * 35 + [1, 2, 3])

        assert top_values(tally.frequencies, tally.max_seen) == [4095] * 32

    def test_boundary_bucket_is_truncated(self):
        """The bucket crossing the limit contributes only what fits."""
        tally = tally_of([100] * 30 + [50] * 5 + [10] * 3)

        assert top_values(tally.frequencies, tally.max_seen) == [100] * 30 + [50] * 2

    def test_includes_zero_value(self):
        """Bucket 0 is reachable."""
        tally = tally_of([0, 0, 3])

        assert top_values(tally.frequencies, tally.max_seen) == [3, 0, 0]

    def test_custom_limit(self):
        tally = tally_of([1, 2, 3, 4])

        assert top_values(tally.frequencies, tally.max_seen, limit=2) == [4, 3]

    @pytest.mark.parametrize("total", [0, 1, 31, 32, 33, 64, 500])
    def test_matches_sorted_largest(self, total):
        """Result equals the largest occurrences of a sorted copy."""
        values = [(i * 2654435761) % 4096 for i in range(total)]
        values += [values[0]] * 5 if values else []
        tally = tally_of(values)

        expected = sorted(values, reverse=True)[:32]
        assert top_values(tally.frequencies, tally.max_seen) == expected


class TestWriteReports:
    """Tests for report text output."""

    def test_round_trip_group(self):
        """0x0F 0xFF 0x00 produces the documented output."""
        sink = io.StringIO()
        write_reports(sink, ingest_bytes(b"\x0f\xff\x00"))

        assert sink.getvalue() == (
            "--Sorted Max 32 Values--\r\n"
            "3840\r\n"
            "255\r\n"
            "--Last 32 Values--\r\n"
            "255\r\n"
            "3840\r\n"
        )

    def test_empty_input_headers_only(self):
        """Empty input prints both headers and nothing else."""
        sink = io.StringIO()
        write_reports(sink, ingest_bytes(b""))

        assert sink.getvalue() == f"{SORTED_HEADER}\r\n{LAST_HEADER}\r\n"

    def test_two_byte_input(self):
        sink = io.StringIO()
        write_reports(sink, ingest_bytes(b"\xab\xcd"))

        assert sink.getvalue() == f"{SORTED_HEADER}\r\n2748\r\n{LAST_HEADER}\r\n2748\r\n"

    def test_headers_state_count(self):
        assert "32" in SORTED_HEADER and "Sorted Max" in SORTED_HEADER
        assert "32" in LAST_HEADER and "Last" in LAST_HEADER

    def test_line_counts_capped(self):
        """Each report has at most 32 value lines."""
        tally = tally_of(list(range(100)))
        sink = io.StringIO()
        write_reports(sink, tally)

        lines = sink.getvalue().split("\r\n")
        assert lines[0] == SORTED_HEADER
        assert lines[33] == LAST_HEADER
        assert lines[1:33] == [str(v) for v in range(99, 67, -1)]
        assert lines[34:66] == [str(v) for v in range(68, 100)]
        assert lines[66] == ""

    def test_render_matches_write(self):
        tally = tally_of([3, 1, 4, 1, 5])
        sink = io.StringIO()
        write_reports(sink, tally)

        assert render_reports(tally) == sink.getvalue()


class TestWriteFailures:
    """Tests for sinks that fail mid-report."""

    def test_sorted_report_failure(self):
        """A failing write raises WriteFailed."""
        with pytest.raises(WriteFailed, match="Sorted Max"):
            write_sorted_report(BrokenSink(ok_writes=1), tally_of([1, 2]))

    def test_last_report_failure(self):
        with pytest.raises(WriteFailed, match="Last"):
            write_last_report(BrokenSink(), tally_of([1]))

    def test_failure_in_first_report_skips_second(self):
        """The last-values report is never attempted after a failure."""
        sink = BrokenSink(ok_writes=2)

        with pytest.raises(WriteFailed):
            write_reports(sink, tally_of([1, 2, 3]))

        assert LAST_HEADER + "\r\n" not in sink.lines
        assert len(sink.lines) == 2

    def test_wraps_os_error(self):
        with pytest.raises(WriteFailed) as exc_info:
            write_sorted_report(BrokenSink(), Tally())

        assert isinstance(exc_info.value.__cause__, OSError)
