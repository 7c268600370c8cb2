"""Tests for the line chunker."""

import pytest

from conftest import make_line
from reviewpack.boundaries import find_boundaries
from reviewpack.chunkers import ChunkBudget, LineChunker, chunk_text
from reviewpack.errors import ConfigurationError
from reviewpack.utils.tokens import estimate_tokens, split_lines


def varied_text(count: int = 300) -> str:
    return "".join("v" * ((i * 37) % 120) + "\n" for i in range(count))


BUDGETS = [
    ChunkBudget(max_tokens=50, overlap_tokens=10),
    ChunkBudget(max_tokens=200, overlap_tokens=50),
    ChunkBudget(max_tokens=100, overlap_tokens=0),
    ChunkBudget(max_tokens=4000, overlap_tokens=200),
    ChunkBudget(max_tokens=30, overlap_tokens=29),
    ChunkBudget(max_tokens=120, overlap_tokens=60, boundary_tolerance=50),
]


def test_empty_text_produces_no_chunks():
    assert LineChunker().chunk("", "empty.py", ChunkBudget()) == []


def test_small_file_is_one_chunk():
    text = "".join(f"line {i}\n" for i in range(1, 11))
    chunks = LineChunker().chunk(text, "small.py", ChunkBudget(max_tokens=10**6, overlap_tokens=200))

    assert len(chunks) == 1
    only = chunks[0]
    assert (only.number, only.start_line, only.end_line) == (1, 1, 10)
    assert only.overlap == ""
    assert only.overlap_line_count == 0
    assert only.content == text


@pytest.mark.parametrize("budget", BUDGETS)
def test_new_lines_cover_file_exactly_once(budget):
    text = varied_text()
    chunks = LineChunker().chunk(text, "varied.txt", budget)

    assert "".join(c.new_text for c in chunks) == text
    assert [c.number for c in chunks] == list(range(1, len(chunks) + 1))
    assert chunks[0].start_line == 1
    assert chunks[-1].end_line == len(split_lines(text))
    for previous, current in zip(chunks, chunks[1:]):
        assert current.start_line == previous.end_line + 1


@pytest.mark.parametrize("budget", BUDGETS)
def test_overlap_is_bounded_suffix_of_previous_chunk(budget):
    chunks = LineChunker().chunk(varied_text(), "varied.txt", budget)

    assert chunks[0].overlap == ""
    for previous, current in zip(chunks, chunks[1:]):
        assert previous.content.endswith(current.overlap)
        overlap_lines = split_lines(current.overlap)
        assert len(overlap_lines) == current.overlap_line_count
        # Only the frontmost overlap line may cross the overlap budget.
        assert sum(estimate_tokens(line) for line in overlap_lines[1:]) < max(budget.overlap_tokens, 1)
        if budget.overlap_tokens == 0:
            assert current.overlap == ""


@pytest.mark.parametrize("budget", BUDGETS)
def test_chunks_respect_budget(budget):
    for chunk in LineChunker().chunk(varied_text(), "varied.txt", budget):
        assert estimate_tokens(chunk.content) <= chunk.token_count
        if chunk.token_count > budget.max_tokens:
            assert chunk.line_count == 1
            assert chunk.overlap_line_count == 0


def test_oversized_line_is_emitted_alone():
    text = make_line(5) * 3 + make_line(50) + make_line(5) * 3
    chunks = LineChunker().chunk(text, "big.js", ChunkBudget(max_tokens=20, overlap_tokens=5))

    assert [(c.start_line, c.end_line) for c in chunks] == [(1, 3), (4, 4), (5, 7)]
    oversized = chunks[1]
    assert oversized.token_count == 50
    assert oversized.overlap_line_count == 0
    assert oversized.is_over_budget(20)
    assert chunks[2].overlap_line_count == 0
    assert "".join(c.new_text for c in chunks) == text


def test_overlap_is_trimmed_to_fit_next_line():
    text = make_line(5) * 4 + make_line(18)
    chunks = LineChunker().chunk(text, "trim.js", ChunkBudget(max_tokens=20, overlap_tokens=10))

    assert [(c.start_line, c.end_line) for c in chunks] == [(1, 4), (5, 5)]
    assert chunks[1].overlap_line_count == 0
    assert chunks[1].token_count == 18


def test_overlap_takes_line_larger_than_overlap_budget_whole():
    text = make_line(30) * 10
    chunks = LineChunker().chunk(text, "wide.js", ChunkBudget(max_tokens=100, overlap_tokens=20))

    assert [(c.start_line, c.end_line) for c in chunks] == [(1, 3), (4, 5), (6, 7), (8, 9), (10, 10)]
    assert [c.overlap_line_count for c in chunks] == [0, 1, 1, 1, 1]
    assert chunks[1].overlap == make_line(30)
    assert chunks[1].token_count == 90
    assert all(c.token_count <= 100 for c in chunks)


def test_overlap_overshoots_by_at_most_one_line():
    text = make_line(10) * 3 + make_line(30) + make_line(10) * 3
    chunks = LineChunker().chunk(text, "wide.js", ChunkBudget(max_tokens=60, overlap_tokens=20))

    assert (chunks[0].start_line, chunks[0].end_line) == (1, 4)
    second = chunks[1]
    assert second.overlap == make_line(30)
    assert (second.start_line, second.end_line) == (5, 7)
    assert second.token_count == 60


def two_function_file() -> str:
    body = [make_line(60, "# body") for _ in range(100)]
    body[50] = make_line(60, "def handler_51():")
    return "".join(body)


def test_split_moves_back_to_boundary_hint():
    text = two_function_file()
    budget = ChunkBudget(max_tokens=4000, overlap_tokens=200, boundary_tolerance=20)
    chunks = LineChunker().chunk(text, "handlers.py", budget, find_boundaries(text, "python"))

    assert len(chunks) == 2
    first, second = chunks
    assert (first.start_line, first.end_line, first.token_count) == (1, 50, 3000)
    assert second.start_line == 51
    assert second.end_line == 100
    assert second.overlap_line_count == 4
    assert second.content_start_line == 47
    assert second.token_count == 3240
    assert second.overlap == "".join(split_lines(text)[46:50])
    assert second.new_text.startswith("def handler_51():")


def test_split_stays_at_budget_without_nearby_hint():
    text = two_function_file()
    budget = ChunkBudget(max_tokens=4000, overlap_tokens=200, boundary_tolerance=10)
    chunks = LineChunker().chunk(text, "handlers.py", budget, find_boundaries(text, "python"))

    assert [(c.start_line, c.end_line) for c in chunks] == [(1, 66), (67, 100)]
    assert chunks[0].token_count == 3960


def test_misaligned_and_out_of_range_hints_are_tolerated():
    text = varied_text(100)
    hints = [-10, 3, 3, 57, 1000, 10**9, len(text)]
    chunks = LineChunker().chunk(text, "hints.txt", ChunkBudget(max_tokens=60, overlap_tokens=10), hints)

    assert "".join(c.new_text for c in chunks) == text


def test_text_without_trailing_newline():
    text = make_line(5) * 9 + "tail"
    chunks = chunk_text(text, max_tokens=12, overlap_tokens=5)

    assert "".join(c.new_text for c in chunks) == text
    assert chunks[-1].new_text.endswith("tail")


@pytest.mark.parametrize(
    "max_tokens,overlap_tokens",
    [(100, 100), (100, 150), (0, 0), (-5, 0), (100, -1)],
)
def test_invalid_budget_is_rejected(max_tokens, overlap_tokens):
    with pytest.raises(ConfigurationError):
        chunk_text("", max_tokens=max_tokens, overlap_tokens=overlap_tokens)


def test_negative_boundary_tolerance_is_rejected():
    with pytest.raises(ConfigurationError):
        LineChunker().chunk("a\n", "a.py", ChunkBudget(boundary_tolerance=-1))


def test_chunk_manifest_entry():
    chunks = chunk_text(make_line(5) * 10, max_tokens=20, overlap_tokens=5)

    assert chunks[1].to_manifest() == {
        "number": 2,
        "start_line": 5,
        "end_line": 7,
        "overlap_lines": 1,
        "tokens": 20,
    }
