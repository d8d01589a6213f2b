from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .config import EvaluationOptions, load_options
from .corpus import CorpusError
from .pipeline import run_evaluation
from .pos import TaggerError
from .report import write_report


logger = logging.getLogger("keyphrase_eval")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Run every keyphrase model over a corpus and write a precision report")
    p.add_argument("--config", help="YAML options file")
    p.add_argument("--corpus", help="Directory of .abstr/.uncontr files (default Training)")
    p.add_argument("--stopwords", help="Stopword file, one per line (default stopwords.txt)")
    p.add_argument("--out", help="Report path (default report.txt)")
    p.add_argument("--top-k", type=int, help="Keyphrases kept per document (default 5)")
    p.add_argument("--log-level", default="INFO", help="Logging level (default INFO)")
    args = p.parse_args(argv)
    if args.top_k is not None and args.top_k < 1:
        p.error("--top-k must be >= 1")

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    overrides = {
        "corpus_dir": args.corpus,
        "stopwords_path": args.stopwords,
        "report_path": args.out,
        "top_k": args.top_k,
    }

    try:
        opts = load_options(args.config) if args.config else EvaluationOptions()
        opts = replace(opts, **{k: v for k, v in overrides.items() if v is not None})
        results = run_evaluation(opts)
    except (FileNotFoundError, ValueError, CorpusError, TaggerError) as e:
        logger.error("Evaluation failed: %s", e)
        return 1

    out_path = Path(opts.report_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8") as f:
        write_report(results, f)
    logger.info("Report written to %s", out_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
