from gmpvkit.seek_bar import SeekBar, format_time_label


def test_label_without_duration():
    assert format_time_label(0, 0) == "00:00"


def test_label_short_duration():
    assert format_time_label(65, 600) == "01:05/10:00"


def test_label_long_duration():
    assert format_time_label(3725, 7200) == "01:02:05/02:00:00"


def test_label_long_duration_has_three_fields_per_part():
    parts = format_time_label(100, 5000).split("/")
    assert len(parts) == 2
    assert all(len(p.split(":")) == 3 for p in parts)


def test_label_exactly_one_hour_uses_minutes():
    parts = format_time_label(10, 3600).split("/")
    assert all(len(p.split(":")) == 2 for p in parts)


def test_label_duration_part_matches_duration_alone():
    assert format_time_label(42, 300).split("/")[1] == format_time_label(300, 300).split("/")[1]


def test_label_truncates_fractions():
    assert format_time_label(12.9, 100.7) == format_time_label(12, 100)


def test_new_bar_label_matches_zero():
    bar = SeekBar()
    assert bar.label == format_time_label(0, 0)


def test_set_duration_updates_range_and_label():
    bar = SeekBar()
    bar.set_duration(250.0)
    assert bar.upper == 250.0
    assert bar.lower == 0.0
    assert bar.label == format_time_label(0, 250.0)


def test_set_pos_same_second_keeps_label():
    bar = SeekBar()
    bar.set_duration(100)
    bar.set_pos(5.1)
    label = bar.label
    bar.set_pos(5.8)
    assert bar.label == label
    assert bar.value == 5.8


def test_set_pos_new_second_updates_label():
    bar = SeekBar()
    bar.set_duration(100)
    bar.set_pos(7.2)
    assert bar.label == format_time_label(7, 100)


def test_change_value_reports_seek():
    seen = []
    bar = SeekBar(seen.append)
    bar.set_duration(100)
    assert bar.change_value(42.5) is True
    assert seen == [42.5]


def test_change_value_ignored_without_duration():
    seen = []
    bar = SeekBar(seen.append)
    assert bar.change_value(3.0) is False
    assert seen == []