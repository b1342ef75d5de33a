"""Command line interface for dna-translator."""

from __future__ import annotations

import argparse
import logging
import sys
import textwrap
from pathlib import Path

import yaml

from .exporter import write_text
from .pipeline import RunConfig, read_input, run_pipeline
from .playback import DEFAULT_INTERVAL_MS, PlaybackStep, TranslationPlayback
from .structure_client import (
    ESMFOLD_URL,
    MIN_STRUCTURE_LENGTH,
    RCSB_URL,
    StructureClient,
    StructureClientConfig,
    StructureRequestRejected,
)
from .utils_seq import Strand

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG = Path("config/config.yaml")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dna-translator",
        description="Translate DNA into protein and report codon and residue statistics.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    translate_parser = subparsers.add_parser(
        "translate",
        help="Translate a sequence and export protein, codon and composition reports.",
    )
    source = translate_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--input", type=Path, help="Text or FASTA file to translate.")
    source.add_argument("--sequence", help="Raw DNA or FASTA text.")
    _add_frame_arguments(translate_parser)
    translate_parser.add_argument(
        "--record",
        type=int,
        help="Zero-based record to use from a multi-record FASTA file.",
    )
    translate_parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG,
        help="Path to the YAML configuration file (optional).",
    )
    translate_parser.add_argument(
        "--out-dir",
        type=Path,
        help="Output directory (overrides `out_dir` from the configuration).",
    )

    structure_parser = subparsers.add_parser(
        "structure",
        help="Predict a structure with ESMFold or download one from RCSB PDB.",
    )
    target = structure_parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--protein", help="One-letter protein sequence to fold.")
    target.add_argument("--pdb-id", help="Four-character PDB identifier to download.")
    structure_parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG,
        help="Path to the YAML configuration file (optional).",
    )
    structure_parser.add_argument(
        "--out",
        type=Path,
        default=Path("structure.pdb"),
        help="Where to write the PDB payload (default: structure.pdb).",
    )

    animate_parser = subparsers.add_parser(
        "animate",
        help="Show the protein being built codon by codon.",
    )
    animate_parser.add_argument("--sequence", required=True, help="Raw DNA text.")
    _add_frame_arguments(animate_parser)
    animate_parser.add_argument(
        "--speed",
        type=int,
        help="Milliseconds between codons, 150-1200 (default from config or 600).",
    )
    animate_parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG,
        help="Path to the YAML configuration file (optional).",
    )
    return parser


def _add_frame_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--frame",
        type=int,
        default=0,
        choices=[0, 1, 2],
        help="Reading frame offset (default: 0).",
    )
    parser.add_argument(
        "--strand",
        default="+",
        choices=["+", "-"],
        help="Strand to read: + forward, - reverse complement (default: +).",
    )


def _load_config(path: Path, required: bool = False) -> dict:
    if not path.exists():
        if required:
            raise FileNotFoundError(f"Config file not found: {path}")
        LOGGER.debug("No config file at %s, using defaults", path)
        return {}
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def _resolve_path(value: str | Path | None) -> Path | None:
    if value is None:
        return None
    return Path(value).expanduser()


def _structure_config(raw_config: dict) -> StructureClientConfig:
    return StructureClientConfig(
        esmfold_url=raw_config.get("esmfold_url") or ESMFOLD_URL,
        rcsb_url=raw_config.get("rcsb_url") or RCSB_URL,
        min_length=int(raw_config.get("min_structure_length", MIN_STRUCTURE_LENGTH)),
        rate_limit_sec=float(raw_config.get("rate_limit_sec", 1.0)),
        timeout_sec=float(raw_config.get("timeout_sec", 120.0)),
        cache_dir=_resolve_path(raw_config.get("cache_dir")),
    )


def _run_translate(args: argparse.Namespace) -> int:
    raw_config = _load_config(args.config)
    out_dir = (
        _resolve_path(args.out_dir)
        or _resolve_path(raw_config.get("out_dir", "data/translated"))
        or Path("data/translated")
    )
    if args.input is not None:
        text = read_input(args.input, args.record)
        filename = args.input.name
        name = args.input.stem
    else:
        text = args.sequence
        filename = None
        name = "sequence"

    run_config = RunConfig(
        out_dir=out_dir,
        frame=args.frame,
        strand=Strand.parse(args.strand),
        name=name,
    )
    summary = run_pipeline(text, run_config, filename)
    _print_summary(summary)
    return 0


def _run_structure(args: argparse.Namespace) -> int:
    raw_config = _load_config(args.config)
    client = StructureClient(_structure_config(raw_config))
    try:
        if args.protein is not None:
            payload = client.predict_structure(args.protein)
        else:
            payload = client.fetch_pdb(args.pdb_id)
    except StructureRequestRejected as exc:
        print(f"Request rejected: {exc}", file=sys.stderr)
        return 2
    path = write_text(payload, args.out)
    print(f"Structure written to {path}")
    return 0


def _run_animate(args: argparse.Namespace) -> int:
    raw_config = _load_config(args.config)
    speed = args.speed or int(raw_config.get("animation_ms", DEFAULT_INTERVAL_MS))
    playback = TranslationPlayback(args.sequence, args.frame, args.strand, speed)
    if playback.orf is None:
        print("No start codon (ATG) found.")
        return 0

    def _show(step: PlaybackStep) -> None:
        print(f"{step.index:>5}  {step.codon}  {step.amino_acid}  {step.built}", flush=True)

    try:
        protein = playback.play(_show)
    except KeyboardInterrupt:
        playback.cancel()
        print("Playback cancelled.")
        return 130
    print(f"Protein: {protein}")
    return 0


def _print_summary(summary: dict) -> None:
    result = summary.get("result", {})
    framed = result.get("framed_translation", {})
    stats = result.get("protein_stats", {})
    composition = result.get("composition", {})
    lines = [
        f"Name: {summary.get('name')}",
        f"Sequence length: {summary.get('length', 0)} nt",
        f"GC content: {composition.get('gc_percent', 0)}%",
        f"Sequence type: {summary.get('sequence_type')}",
        f"Frame {result.get('frame')} strand {result.get('strand')}: "
        f"{framed.get('one_letter') or '(no start codon)'}",
        f"Protein length: {stats.get('protein_length', 0)} aa, "
        f"MW ~ {stats.get('molecular_weight_kda', 0):.2f} kDa",
    ]
    if summary.get("pdb_id"):
        lines.append(f"PDB id in header: {summary['pdb_id']}")

    if summary.get("paths"):
        lines.append("Outputs:")
        for label, path in summary["paths"].items():
            lines.append(f"  - {label}: {path}")
    else:
        lines.append("No outputs generated.")

    print(textwrap.dedent("\n".join(lines)))


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.command == "translate":
        return _run_translate(args)
    if args.command == "structure":
        return _run_structure(args)
    if args.command == "animate":
        return _run_animate(args)
    parser.print_help()
    return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
