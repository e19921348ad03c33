"""Tests for SnakeBody."""

import pytest

from snake_core.body import SnakeBody


class TestSnakeBody:
    """Tests for advancing and growing the body."""

    def test_peek_head(self):
        """The first cell is the head."""
        body = SnakeBody([(10, 10), (9, 10), (8, 10)])
        assert body.peek_head() == (10, 10)

    def test_advance_without_growth_keeps_length(self):
        """Moving drops the tail."""
        body = SnakeBody([(10, 10), (9, 10), (8, 10)])
        body.advance((11, 10), grow=False)
        assert list(body) == [(11, 10), (10, 10), (9, 10)]
        assert (8, 10) not in body

    def test_advance_with_growth_lengthens(self):
        """Growing keeps the tail."""
        body = SnakeBody([(10, 10), (9, 10), (8, 10)])
        body.advance((11, 10), grow=True)
        assert list(body) == [(11, 10), (10, 10), (9, 10), (8, 10)]
        assert len(body) == 4

    def test_advance_onto_vacated_tail(self):
        """A head moving onto the old tail cell stays in the occupied set."""
        body = SnakeBody([(1, 1), (2, 1), (2, 2), (1, 2)])
        body.advance((1, 2), grow=False)
        assert (1, 2) in body
        assert len(body) == 4

    def test_empty_body_rejected(self):
        """A body needs at least one cell."""
        with pytest.raises(ValueError):
            SnakeBody([])

    def test_duplicate_cells_rejected(self):
        """Body cells must be distinct."""
        with pytest.raises(ValueError):
            SnakeBody([(1, 1), (1, 1)])
