import pytest

from flowengine.core.context import FlowConfig
from flowkit.dialogue.parser import parse_line


@pytest.mark.parametrize("raw, speaker, text", [
    ("Alice: Hello", "Alice", "Hello"),
    ("Hello", None, "Hello"),
    ("Time::now: tick", "Time:now", "tick"),
    ("Clock: It is 12::30.", "Clock", "It is 12:30."),
    ("  Bob  :   spaced out  ", "Bob", "spaced out"),
    (": no name", "", "no name"),
])
def test_parse_line(raw, speaker, text):
    line = parse_line(raw)

    assert line.speaker == speaker
    assert line.text == text
    assert line.choices == []


def test_extra_separators_keep_text(caplog):
    line = parse_line("Alice: Note: read this")

    assert line.speaker == "Alice"
    assert line.text == "Note: read this"
    assert "split at more" in caplog.text


def test_thought_tag_wraps_text():
    line = parse_line("Alice: I wonder...", tags=["thought"])

    assert line.speaker == "Alice"
    assert line.text == "<i>I wonder...</i>"


def test_other_tags_leave_text_alone():
    assert parse_line("Hmm", tags=["sad"]).text == "Hmm"


def test_custom_separator_and_markup():
    config = FlowConfig(
        speaker_separator="|",
        escaped_separator="||",
        thought_tag="inner",
        thought_format="*{text}*",
    )

    line = parse_line("Eve | a||b", tags=["inner"], config=config)

    assert line.speaker == "Eve"
    assert line.text == "*a|b*"
