"""Convenience runner for dna-translator without installing the CLI."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from dna_translator.cli import _load_config, _print_summary, _resolve_path
from dna_translator.pipeline import RunConfig, read_input, run_pipeline
from dna_translator.utils_seq import Strand


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Translate a DNA or FASTA file and export the reports.",
    )
    parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="Text or FASTA file to translate.",
    )
    parser.add_argument(
        "--frame",
        type=int,
        default=0,
        choices=[0, 1, 2],
        help="Reading frame offset.",
    )
    parser.add_argument(
        "--strand",
        default="+",
        choices=["+", "-"],
        help="Strand to read.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("config/config.yaml"),
        help="Path to configuration YAML file.",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(level=logging.INFO)
    cfg = _load_config(args.config)
    out_dir = _resolve_path(cfg.get("out_dir", "data/translated")) or Path("data/translated")

    run_config = RunConfig(
        out_dir=out_dir,
        frame=args.frame,
        strand=Strand.parse(args.strand),
        name=args.input.stem,
    )
    text = read_input(args.input)
    summary = run_pipeline(text, run_config, args.input.name)
    _print_summary(summary)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
