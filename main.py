from __future__ import annotations

"""
CLI entrypoint for the trip safety experiment: shuffle and split a labelled
trip CSV, fit logistic regression with conjugate gradients, then rank and
score the held-out trips.
"""

import argparse
from pathlib import Path

import numpy as np

from trip_safety import (
    LogisticRegressionCG,
    build_design_matrices,
    compute_classification_metrics,
    density_remap,
    load_trips,
    rank_order,
    shuffle_split,
    split_features_labels,
    summarize_coefficients,
)
from trip_safety.constants import (
    DEFAULT_C,
    DEFAULT_CSV_PATH,
    DEFAULT_MAX_ITER,
    DEFAULT_SEED,
    DEFAULT_TEST_SIZE,
)
from trip_safety.metrics import majority_baseline
from trip_safety.ranking import ranking_table


def print_metrics(label: str, metrics: dict):
    """One summary line per model, then the trip confusion counts."""
    (safe_ok, false_alarm), (missed, caught) = metrics["confusion_matrix"].tolist()
    print(
        f"[{label}] ROC-AUC {metrics['roc_auc']:.3f} | Rec {metrics['recall']:.3f} | "
        f"Prec {metrics['precision']:.3f} | F1 {metrics['f1']:.3f} | "
        f"Acc {metrics['accuracy']:.3f}"
    )
    print(
        f"    Event rate {metrics['event_rate']:.3f}, flagged {metrics['flagged_rate']:.3f}: "
        f"caught {caught}, missed {missed}, false alarms {false_alarm}, quiet {safe_ok}"
    )


def build_arg_parser():
    """CLI parser with knobs for the split, model params and outputs."""
    parser = argparse.ArgumentParser(
        description="Rank trips by predicted risk of a safety event."
    )
    parser.add_argument("--csv-path", type=Path, default=Path(DEFAULT_CSV_PATH))
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Shuffle seed.")
    parser.add_argument(
        "--test-size",
        type=float,
        default=DEFAULT_TEST_SIZE,
        help="Share of shuffled rows held out for ranking.",
    )
    parser.add_argument(
        "--C",
        dest="C",
        type=float,
        default=DEFAULT_C,
        help="Inverse L2 regularization strength.",
    )
    parser.add_argument(
        "--max-iter",
        type=int,
        default=DEFAULT_MAX_ITER,
        help="Line searches if positive, function evaluations if negative.",
    )
    parser.add_argument(
        "--density-columns",
        type=str,
        default="",
        help="Comma-separated categorical columns to replace by training event rates.",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=10,
        help="How many of the riskiest held-out trips to print.",
    )
    parser.add_argument("--plots-dir", type=Path, default=None, help="Write PNG plots here.")
    parser.add_argument("--verbose", action="store_true", help="Log every line search.")
    return parser


def run(args: argparse.Namespace):
    """Fit on the training share, then rank and evaluate the held-out share."""
    trips = load_trips(args.csv_path)
    print(f"Read {len(trips)} trips from {args.csv_path} (seed {args.seed})")

    train_df, test_df = shuffle_split(trips, test_size=args.test_size, random_state=args.seed)
    X_train, y_train = split_features_labels(train_df)
    X_test, y_test = split_features_labels(test_df)
    if y_train is None:
        raise ValueError(f"{args.csv_path} has no event counts to train on")

    density_columns = [c.strip() for c in args.density_columns.split(",") if c.strip()]
    if density_columns:
        X_train, X_test = density_remap(X_train, y_train, X_test, density_columns)
        print(f"Density-remapped columns: {density_columns}")

    design_train, design_test, meta = build_design_matrices(X_train, X_test)
    print(f"Train shape: {meta['train_shape']}, Test shape: {meta['test_shape']}")

    model = LogisticRegressionCG(
        design_train,
        y_train.to_numpy(),
        C=args.C,
        max_iter=args.max_iter,
        verbose=args.verbose,
    )
    result = model.fit_result()
    theta = result.theta
    final_cost = result.costs[-1] if result.costs else float("nan")
    print(f"    CG iterations: {result.iterations}, final cost: {final_cost:.6f}")

    probs = model.predict(design_test, theta, round=False)
    print(f"Max predicted risk: {np.max(probs) if probs.size else float('nan'):.4f}")

    if y_test is not None:
        print_metrics("Majority baseline", majority_baseline(y_train, y_test))
        test_metrics = compute_classification_metrics(y_test, probs)
        print_metrics("CG logistic", test_metrics)

    top = summarize_coefficients(theta, meta["feature_names"], top_k=8)
    print(f"\nIntercept: {theta[0]:.4f}")
    print("\nTop positive features:")
    print(top["positive"])
    print("\nTop negative features:")
    print(top["negative"])

    ranked = rank_order(probs)
    table = ranking_table(probs, index=test_df["ID"].astype(int))
    print(f"\nRiskiest held-out trips (top {args.top}):")
    print(table.head(args.top).to_string(index=False))

    if args.plots_dir is not None:
        from trip_safety.plots import plot_cost_history, plot_roc

        args.plots_dir.mkdir(parents=True, exist_ok=True)
        plot_cost_history(result.costs, args.plots_dir / "cost_history.png")
        if y_test is not None:
            plot_roc(y_test, probs, args.plots_dir / "roc_curve.png")
        print(f"Plots written to {args.plots_dir}")

    return ranked


def main(args: argparse.Namespace | None = None):
    """Parse arguments (unless given) and run the experiment."""
    args = args or build_arg_parser().parse_args()
    return run(args)


if __name__ == "__main__":
    main()
