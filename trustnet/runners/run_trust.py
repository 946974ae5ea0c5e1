import argparse
import json
import logging
import os
import sys

from trustnet.core import env
from trustnet.core.io import read_records, save_json
from trustnet.core.logger import create_logger
from trustnet.graph.trust_graph import GENERATIONS, build_graph, graph_summary
from trustnet.export.score_matrix import export_scores
from trustnet.analysis.summary import (
    DATASET_START, format_epoch_gmt, format_report, perform_analysis, read_and_process,
)
from trustnet.analysis.viz import render_charts
from trustnet.analysis.validate import validate_matrix

log = logging.getLogger(__name__)


def _require_file(path: str, flag: str) -> None:
    if not os.path.isfile(path):
        print(f"{flag}: no such file: {path}", file=sys.stderr)
        sys.exit(2)


def load_generation(records_csv: str, generation: int):
    _require_file(records_csv, "--records_csv")
    records = read_records(records_csv)
    graph, last_time = build_graph(records, generation)
    log.info("generation %d: %d of %d records, last transaction %d",
             generation, graph.edge_count, len(records), last_time)
    return graph, last_time


def run_build(args):
    graph, _ = load_generation(args.records_csv, args.generation)
    log.info("graph summary: %s", graph_summary(graph))
    n = export_scores(graph, args.out_csv, algo=args.algo, n_jobs=args.n_jobs,
                      progress=not args.no_progress)
    print(f"[build] saved → {args.out_csv}  ({n} rows)")


def run_analyze(args):
    _require_file(args.scores_csv, "--scores_csv")
    _, last_time = load_generation(args.records_csv, args.generation)

    print(f"Graph generation: {args.generation}")
    print(f"Timeframe: {DATASET_START} - {format_epoch_gmt(last_time)}")

    processed = read_and_process(args.scores_csv)
    report = perform_analysis(processed, avg_threshold=args.avg_threshold,
                              stddev_threshold=args.stddev_threshold)
    out_dir = args.out_dir or os.path.dirname(os.path.abspath(args.scores_csv)) or "."
    hist, scat = render_charts(report.averages, report.std_devs, out_dir)
    log.info("charts saved: %s, %s", hist, scat)

    print(format_report(report))
    if args.report_json:
        out = report.to_dict()
        out.update({"generation": args.generation, "last_transaction": last_time})
        save_json(args.report_json, out)
        print(f"[analyze] saved → {args.report_json}")


def run_validate(args):
    _require_file(args.scores_csv, "--scores_csv")
    report = validate_matrix(args.scores_csv)
    print(json.dumps(report, indent=2, ensure_ascii=False))
    if args.report_json:
        save_json(args.report_json, report)
    if not report["ok"]:
        sys.exit(1)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Propagated trust scores over a signed rating network")
    ap.add_argument("--log_file", type=str, default=None, help="Mirror log output to this file")
    sub = ap.add_subparsers(dest="cmd")

    p1 = sub.add_parser("build", help="Build one generation's graph and export the score matrix")
    p1.add_argument("--records_csv", default=env.DATASET_CSV, help="Headerless CSV: source,target,rating,time")
    p1.add_argument("--out_csv", default=env.SCORES_CSV, help="Output score matrix CSV")
    p1.add_argument("--generation", type=int, choices=GENERATIONS, default=env.GENERATION)
    p1.add_argument("--algo", default="modified_dijkstra", help="Registered propagator name")
    p1.add_argument("--n_jobs", type=int, default=1, help="Parallel start actors (joblib threads)")
    p1.add_argument("--no_progress", action="store_true", help="Hide the tqdm progress bar")

    p2 = sub.add_parser("analyze", help="Summarize a score matrix and render charts")
    p2.add_argument("--scores_csv", default=env.SCORES_CSV)
    p2.add_argument("--records_csv", default=env.DATASET_CSV, help="Used to recover the generation's last transaction time")
    p2.add_argument("--generation", type=int, choices=GENERATIONS, default=env.GENERATION)
    p2.add_argument("--out_dir", default=None, help="Save figures to this dir (default: same dir as scores_csv)")
    p2.add_argument("--avg_threshold", type=float, default=env.AVG_THRESHOLD)
    p2.add_argument("--stddev_threshold", type=float, default=env.STDDEV_THRESHOLD)
    p2.add_argument("--report_json", default=None)

    p3 = sub.add_parser("validate", help="Check the shape and values of a score matrix")
    p3.add_argument("--scores_csv", default=env.SCORES_CSV)
    p3.add_argument("--report_json", default=None)
    return ap


def main(argv=None):
    ap = build_argparser()
    args = ap.parse_args(argv)
    if args.cmd is None:
        ap.print_help()
        sys.exit(2)

    if getattr(args, "generation", None) is not None and args.generation not in GENERATIONS:
        ap.error(f"--generation must be one of {GENERATIONS}, got {args.generation}")

    create_logger(args.log_file)
    if args.cmd == "build":
        run_build(args)
    elif args.cmd == "analyze":
        run_analyze(args)
    elif args.cmd == "validate":
        run_validate(args)

if __name__ == "__main__":
    main()
