# conftest.py - shared fixtures
import os

import pytest

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


@pytest.fixture
def fixture_path():
    def _path(*parts: str) -> str:
        return os.path.join(FIXTURES_DIR, *parts)

    return _path


def covered_lines(blocks):
    """Line numbers claimed by each block, in block order."""
    lines = []
    for b in blocks:
        lines.extend(range(b.line_start, b.line_end + 1))
    return lines


def assert_blocks_cover_source(blocks, source_text):
    """Every non-blank line belongs to exactly one block; blocks are ordered and non-empty."""
    lines = source_text.split("\n")
    claimed = covered_lines(blocks)
    assert len(claimed) == len(set(claimed)), "a line is claimed twice"
    non_blank = {i + 1 for i, line in enumerate(lines) if line.strip()}
    assert non_blank <= set(claimed), f"lines lost: {sorted(non_blank - set(claimed))}"
    for earlier, later in zip(blocks, blocks[1:]):
        assert earlier.line_end <= later.line_start
    for b in blocks:
        assert b.content.strip()
        assert b.line_start <= b.line_end
    for b in blocks:
        if b.is_code:
            assert b.content == "\n".join(lines[b.line_start - 1 : b.line_end])


@pytest.fixture
def assert_covers():
    return assert_blocks_cover_source
