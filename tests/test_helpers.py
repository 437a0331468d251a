from nbstats import helpers


def test_fmt_g():
    assert helpers.fmt_g(16.666666666) == "16.6667"
    assert helpers.fmt_g(15.0) == "15"


def test_format_percent():
    assert helpers.format_percent(30.10299957) == "30.10%"
    assert helpers.format_percent(6.6946, width=6) == "  6.69%"


def test_bar():
    assert helpers.bar(66.67, 2.5) == "#" * 26
    assert helpers.bar(0.0, 1.25) == ""
