import pytest

from supplyplanner.color import Color
from supplyplanner.styled_console import DEFAULT_FONT_SIZE, Style, StyledConsole, TextStyle


def test_default_style():
    console = StyledConsole()
    assert console.style == Style(Color.BLACK, TextStyle.NORMAL, DEFAULT_FONT_SIZE)
    assert console.style.size == 11


def test_write_returns_length_and_records_text():
    console = StyledConsole()
    assert console.write("hello") == 5
    console.write(" world")
    assert console.contents == [(Style(), "hello world")]


def test_set_style_splits_runs():
    console = StyledConsole()
    console.write("a")
    console.set_style(Color.RED, TextStyle.BOLD, 14)
    console.write("b")
    runs = console.contents
    assert [text for _, text in runs] == ["a", "b"]
    assert runs[1][0] == Style(Color.RED, TextStyle.BOLD, 14)


def test_render_html_span():
    console = StyledConsole()
    console.set_style(Color.RED, TextStyle.BOLD_ITALIC, 11)
    console.write("hi")
    page = console.render_html()
    assert (
        '<span style="color:#ff0000;font-weight:bold;font-style:italic;'
        'font-size:11pt;">hi</span>' in page
    )
    assert page.strip().startswith("<html>")
    assert page.strip().endswith("</html>")


def test_render_html_escapes_text():
    console = StyledConsole()
    console.write("<b> & more")
    page = console.render_html()
    assert "&lt;b&gt; &amp; more" in page
    assert "<b>" not in page


def test_empty_writes_make_no_runs():
    console = StyledConsole()
    console.set_style(Color.BLUE)
    console.set_style(Color.GREEN)
    assert console.contents == []
    assert "<span" not in console.render_html()


def test_clear_forgets_everything():
    console = StyledConsole()
    console.write("gone")
    console.clear()
    assert console.contents == []
    assert "gone" not in console.render_html()


def test_styled_restores_previous_style():
    console = StyledConsole()
    console.set_style(Color.GRAY, TextStyle.ITALIC, 9)
    before = console.style
    with console.styled(color=Color.RED) as inner:
        inner.write("x")
        assert console.style == Style(Color.RED, TextStyle.ITALIC, 9)
    assert console.style == before
    assert console.contents[0][0].color == Color.RED


def test_styled_restores_after_exception():
    console = StyledConsole()
    before = console.style
    with pytest.raises(RuntimeError):
        with console.styled(Color.YELLOW, TextStyle.BOLD, 20):
            console.write("boom")
            raise RuntimeError("fail")
    assert console.style == before
    assert console.contents == [(Style(Color.YELLOW, TextStyle.BOLD, 20), "boom")]


def test_print_to_console():
    console = StyledConsole()
    print("line", file=console)
    assert console.contents == [(Style(), "line\n")]