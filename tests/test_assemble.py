from pdf_highlights.core.assemble import assemble, collapse_whitespace


def test_fragments_are_joined_and_collapsed():
    assert assemble(["a  ", " b", "c"]) == "a b c"


def test_assemble_is_idempotent():
    once = assemble(["a  ", " b", "c"])
    assert assemble([once]) == once


def test_tabs_and_newlines_collapse():
    assert assemble(["\tfirst\nline", "", "  second  "]) == "first line second"


def test_empty_input_gives_empty_string():
    assert assemble([]) == ""
    assert assemble(["   ", "\n"]) == ""


def test_collapse_whitespace_keeps_inner_text():
    assert collapse_whitespace("  Hello    World ") == "Hello World"
