import pytest

from ftping.stats import PingStats


def _stats(sent, rtts):
    stats = PingStats()
    for _ in range(sent):
        stats.record_sent()
    for rtt in rtts:
        stats.record_reply(rtt)
    return stats


def test_replies_track_extremes():
    rtts = [2.5, 7.5, 4.0]
    stats = _stats(len(rtts), rtts)
    assert stats.minimum == min(rtts)
    assert stats.maximum == max(rtts)
    assert stats.received == len(rtts)
    assert stats.sent == len(rtts)


def test_equal_round_trips_have_no_deviation():
    stats = _stats(3, [5.0, 5.0, 5.0])
    assert stats.average() == pytest.approx(5.0)
    assert stats.stddev() == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize("rtts", [[0.1, 0.2], [1.0, 9.0, 3.5], [12.25]])
def test_average_within_bounds_and_deviation_non_negative(rtts):
    stats = _stats(len(rtts), rtts)
    assert stats.minimum <= stats.average() <= stats.maximum
    assert stats.stddev() >= 0.0


def test_loss_is_zero_when_everything_answered():
    stats = _stats(4, [1.0, 1.0, 1.0, 1.0])
    assert stats.packet_loss() == 0.0


def test_loss_is_complete_when_nothing_answered():
    stats = _stats(4, [])
    assert stats.packet_loss() == 100.0


def test_loss_undefined_before_sending():
    assert str(PingStats().packet_loss()) == "nan"


def test_lost_does_not_count_as_received():
    stats = PingStats()
    stats.record_sent()
    stats.record_lost()
    assert stats.lost == 1
    assert stats.received == 0


def test_summary_without_replies_omits_round_trip_line():
    summary = _stats(2, []).summary("example.org")
    lines = summary.splitlines()
    assert lines[0] == "--- example.org ping statistics ---"
    assert len(lines) == 2
    assert "round-trip" not in summary


def test_summary_with_replies():
    summary = _stats(2, [2.0, 2.0]).summary("example.org")
    assert summary == (
        "--- example.org ping statistics ---\n"
        "2 packets transmitted, 2 packets received, 0% packet loss\n"
        "round-trip min/avg/max/stddev = 2.000/2.000/2.000/0.000 ms\n"
    )