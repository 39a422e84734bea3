import pytest

from repeatprf.tracestat import (
    ContingencyTable,
    count_bases,
    cumulative_ranks,
    decoded_mean,
    expand_frames,
    frame_dna_text,
    histogram_lines,
    roc_lines,
    stair_traces,
    trace_lines,
    transition_stats,
    window_means,
)


def _frames(values):
    return [(v, v, v, v) for v in values]


def test_count_bases_ignores_other_symbols():
    assert count_bases("TTGAXCN") == {"T": 2, "G": 1, "A": 1, "C": 1}
    assert list(count_bases("")) == ["T", "G", "A", "C"]


def test_expand_frames_paints_bases():
    text = expand_frames(6, "AC", [0, 3], [2, 5])
    assert text == "AANCCN"
    assert len(text) == 6


def test_expand_frames_rejects_out_of_range():
    with pytest.raises(ValueError):
        expand_frames(3, "A", [0], [5])


def test_expand_frames_counts_match():
    text = expand_frames(10, "TG", [1, 4], [3, 9])
    assert count_bases(text) == {"T": 2, "G": 5, "A": 0, "C": 0}
    assert text.count("N") == 3


def test_decoded_mean_constant_decode():
    histogram = [2, 3, 5]
    assert decoded_mean(histogram, [2.0, 2.0, 2.0], 0.0, 10) == pytest.approx(2.0)
    assert decoded_mean(histogram, [2.0, 2.0, 2.0], 0.5, 10) == pytest.approx(1.5)


def test_decoded_mean_needs_frames():
    with pytest.raises(ValueError):
        decoded_mean([1], [1.0], 0.0, 0)


def test_histogram_lines_format_and_running_total():
    lines = histogram_lines([1, 2, 3], [0.5, 1.0, 1.5])
    assert lines[0] == "0 0.500000\t1\t1"
    assert lines[-1].split("\t")[-1] == "6"
    assert len(lines) == 3


def test_contingency_rates():
    perfect = ContingencyTable(tp=4, fp=0, fn=0, tn=7)
    assert perfect.sensitivity() == 1.0
    assert perfect.specificity() == 1.0
    empty = ContingencyTable()
    assert empty.sensitivity() == 0.0
    assert empty.specificity() == 1.0


def test_roc_lines():
    lines = roc_lines([0.0, 0.1], [ContingencyTable(1, 0, 0, 1), ContingencyTable()])
    assert lines[0] == "0.000000\t1.000000\t1.000000"
    assert lines[1] == "0.100000\t1.000000\t0.000000"


def test_frame_dna_text_collapses_runs():
    assert frame_dna_text("AAACCGG", "RRRRRRR") == "ACG"
    assert frame_dna_text("AAACCGG", "RRRRRRR", width=2) == "AC\nG"


def test_frame_dna_text_gap_restarts_base():
    assert frame_dna_text("AANAA", "RRRRR") == "AA"


def test_frame_dna_text_lowercase_on_signal():
    assert frame_dna_text("AA", "SS") == "aa"


def test_frame_dna_text_rejects_bad_width():
    with pytest.raises(ValueError):
        frame_dna_text("A", "R", width=0)


def test_stair_traces_keeps_ends_and_length():
    traces = _frames([0.0, 1.0, 3.0, 6.0, 2.0])
    result = stair_traces(traces)
    assert len(result) == len(traces)
    assert result[0] == traces[0]
    assert result[-1] == traces[-1]


def test_stair_traces_linear_is_unchanged():
    traces = _frames([0.0, 1.0, 2.0, 3.0])
    assert stair_traces(traces) == traces


def test_stair_traces_holds_accelerating_trend():
    result = stair_traces(_frames([0.0, 1.0, 3.0, 6.0]))
    assert [frame[0] for frame in result] == [0.0, 0.0, 0.0, 6.0]


def test_stair_traces_needs_two_frames():
    with pytest.raises(ValueError):
        stair_traces(_frames([1.0]))


def test_window_means_constant():
    traces = _frames([2.5] * 6)
    means = window_means(traces, 3)
    assert len(means) == 4
    assert all(mean == pytest.approx((2.5,) * 4) for mean in means)


def test_window_means_rejects_bad_size():
    traces = _frames([1.0, 2.0])
    with pytest.raises(ValueError):
        window_means(traces, 0)
    with pytest.raises(ValueError):
        window_means(traces, 3)


def test_transition_stats_totals():
    indices = [[1, 2, 2, 3], [0, 0, 0, 0], [5, 4, 5, 4], [9, 9, 8, 8]]
    stats = transition_stats(indices, "TGAC")
    assert len(stats) == 4
    for channel in stats:
        assert sum(c[0] for c in channel.values()) == 3
        assert sum(sum(c[1:]) for c in channel.values()) == 3
    assert stats[1] == {(0, 0): stats[1][(0, 0)]}
    assert stats[1][(0, 0)][0] == 3


def test_transition_stats_rejects_unknown_base():
    with pytest.raises(ValueError):
        transition_stats([[1, 2]], "AX")


def test_cumulative_ranks():
    ranks = cumulative_ranks([3, 1, 3, 2])
    assert ranks == [4, 1, 4, 2]
    assert max(ranks) == 4


def test_trace_lines_format():
    lines = trace_lines([(1.0, 2.0, 3.0, 4.0)], "A", "S")
    assert lines == ["      0\t   1.00000\t   2.00000\t   3.00000\t   4.00000\tA\tS"]


def test_trace_lines_requires_four_channels():
    with pytest.raises(ValueError):
        trace_lines([(1.0, 2.0)], "A", "S")