"""Unit tests for risk ranking."""

from __future__ import annotations

from trip_safety.ranking import rank_order, rank_positions, ranking_table


class TestRanking:
    """Tests for rank_order/rank_positions/ranking_table."""

    def test_highest_score_ranks_first(self) -> None:
        """Scores [0.9, 0.1, 0.5] rank rows 1, 3, 2."""
        scores = [0.9, 0.1, 0.5]

        assert rank_order(scores) == [1, 3, 2]
        assert rank_positions(scores) == [1, 3, 2]

    def test_ties_keep_input_order(self) -> None:
        """Equal scores stay in their original relative order."""
        scores = [0.5, 0.5, 0.9, 0.5]

        assert rank_order(scores) == [3, 1, 2, 4]
        assert rank_positions(scores) == [2, 3, 1, 4]

    def test_empty(self) -> None:
        """No scores, no ranks."""
        assert rank_order([]) == []
        assert rank_positions([]) == []

    def test_table_carries_labels(self) -> None:
        """The table lists rows in rank order with their index labels."""
        table = ranking_table([0.2, 0.8], index=["a", "b"])

        assert table["row"].tolist() == [2, 1]
        assert table["label"].tolist() == ["b", "a"]
        assert table["rank"].tolist() == [1, 2]
        assert table["score"].tolist() == [0.8, 0.2]
