from mermaidforge.models.blocks import FencedBlock
from mermaidforge.reassemble import replace_lines, splice_blocks


def _block(start, end):
    return FencedBlock(start, end, "`", 3, "", "mermaid", "")


def test_replace_lines_inclusive_span():
    assert replace_lines(["a", "b", "c", "d"], 1, 2, ["X"]) == ["a", "X", "d"]
    assert replace_lines(["a", "b"], 0, 1, ["1", "2", "3"]) == ["1", "2", "3"]


def test_replace_lines_does_not_mutate_input():
    lines = ["a", "b", "c"]
    replace_lines(lines, 0, 0, [])
    assert lines == ["a", "b", "c"]


def test_splice_uses_original_indices_regardless_of_growth():
    lines = ["top", "```mermaid", "x", "```", "middle", "```mermaid", "y", "```", "bottom"]
    replacements = [
        (_block(1, 3), ["A1", "A2", "A3", "A4", "A5"]),
        (_block(5, 7), ["B1"]),
    ]
    assert splice_blocks(lines, replacements) == [
        "top", "A1", "A2", "A3", "A4", "A5", "middle", "B1", "bottom",
    ]


def test_splice_order_of_input_pairs_does_not_matter():
    lines = ["0", "1", "2", "3", "4", "5"]
    forward = [(_block(0, 1), ["a"]), (_block(3, 4), ["b", "b"])]
    assert splice_blocks(lines, forward) == splice_blocks(lines, list(reversed(forward)))


def test_splice_with_nothing_to_do():
    assert splice_blocks(["a"], []) == ["a"]
