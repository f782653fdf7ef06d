from dataclasses import dataclass

from datacache.string_streamer import StringStreamer


@dataclass
class _Streamable:
    a: int
    b: int

    def __str__(self):
        return f"({self.a}, {self.b})"


def test_fresh_streamer_converts_to_empty_string():
    assert str(StringStreamer()) == ""


def test_insertion_operator_joins_values():
    s = str(StringStreamer() << 10 << " " << 20)
    assert s == "10 20"


def test_insertion_operator_uses_custom_text_form():
    s = str(StringStreamer() << _Streamable(100, 200))
    assert s == "(100, 200)"


def test_insertion_returns_same_streamer():
    streamer = StringStreamer()
    assert (streamer << "x") is streamer
    assert str(streamer) == "x"


def test_conversion_is_repeatable():
    streamer = StringStreamer() << "ab"
    first = str(streamer)
    second = str(streamer)
    assert first == "ab"
    assert second == "ab"
    streamer << "c"
    assert str(streamer) == "abc"