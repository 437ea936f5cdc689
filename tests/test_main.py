"""End-to-end test of the CLI on a synthetic trip file."""

from __future__ import annotations

import pytest

import main


@pytest.fixture
def trips_csv(tmp_path, make_trip_lines):
    path = tmp_path / "trips.csv"
    path.write_text("\n".join(make_trip_lines(60, seed=11)) + "\n")
    return path


class TestMain:
    """Tests for the CLI entrypoint."""

    def test_ranks_every_held_out_trip(self, trips_csv, capsys) -> None:
        """The ranking is a permutation of the held-out row ids."""
        args = main.build_arg_parser().parse_args(
            ["--csv-path", str(trips_csv), "--seed", "3", "--max-iter", "50"]
        )

        ranked = main.main(args)

        assert len(ranked) == 20
        assert sorted(ranked) == list(range(1, 21))
        out = capsys.readouterr().out
        assert "Read 60 trips" in out
        assert "[CG logistic]" in out

    def test_density_columns_and_plots(self, trips_csv, tmp_path) -> None:
        """Optional remapping and plot output run through."""
        plots_dir = tmp_path / "plots"
        args = main.build_arg_parser().parse_args(
            [
                "--csv-path",
                str(trips_csv),
                "--density-columns",
                "WEATHER",
                "--plots-dir",
                str(plots_dir),
                "--max-iter",
                "-30",
            ]
        )

        main.main(args)

        assert (plots_dir / "cost_history.png").exists()
        assert (plots_dir / "roc_curve.png").exists()

    def test_defaults(self) -> None:
        """Defaults mirror the reference experiment settings."""
        args = main.build_arg_parser().parse_args([])

        assert args.C == 0.03
        assert args.max_iter == 200
        assert args.test_size == 0.33
        assert args.seed == 1

    def test_print_metrics_reports_event_counts(self, capsys) -> None:
        """The second line spells out caught, missed and false-alarm trips."""
        metrics = main.compute_classification_metrics(
            [0, 0, 0, 1, 3], [0.1, 0.7, 0.2, 0.9, 0.3]
        )

        main.print_metrics("CG logistic", metrics)

        lines = capsys.readouterr().out.splitlines()
        assert lines[0].startswith("[CG logistic] ROC-AUC ")
        assert lines[1] == (
            "    Event rate 0.400, flagged 0.400: "
            "caught 1, missed 1, false alarms 1, quiet 2"
        )
