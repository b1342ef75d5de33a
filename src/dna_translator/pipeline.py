"""Orchestration: raw input to translation reports."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

from .analytics import (
    amino_acid_composition,
    codon_usage,
    histogram_rows,
    protein_stats,
)
from .classifier import SequenceType, classify_sequence_type, extract_header_identifier
from .exporter import write_csv, write_fasta, write_jsonl
from .featurizer import base_composition, compute_features, sanitize
from .genetic_code import codon_class, translate_codon
from .translator import OrfSpan, find_orf, translate, translate_framed
from .utils_seq import Strand, check_frame, extract_fasta_body, load_fasta_records, tokenize

LOGGER = logging.getLogger(__name__)

FASTA_EXTENSIONS = (".fasta", ".fa", ".fna")


@dataclass(slots=True)
class RunConfig:
    out_dir: Path
    frame: int = 0
    strand: Strand = Strand.FORWARD
    name: str = "sequence"
    export: bool = True


def looks_like_fasta(text: str, filename: str | None = None) -> bool:
    if filename and filename.lower().endswith(FASTA_EXTENSIONS):
        return True
    return (text or "").startswith(">")


def read_input(path: Path, record: int | None = None) -> str:
    """Read a text or FASTA file; ``record`` picks one entry of a multi-FASTA."""
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    if record is None:
        return path.read_text(encoding="utf-8")
    records = load_fasta_records(path)
    if not 0 <= record < len(records):
        raise ValueError(f"Record {record} out of range; {path} holds {len(records)}.")
    header, sequence = records[record]
    return f">{header}\n{sequence}\n"


def codon_rows(codons: List[str], orf: OrfSpan | None) -> List[dict]:
    """One row per codon for the highlighting view."""
    rows = []
    for index, codon in enumerate(codons):
        in_orf = orf is not None and orf.start <= index < orf.end
        rows.append(
            {
                "index": index,
                "codon": codon,
                "class": codon_class(codon),
                "amino_acid": translate_codon(codon),
                "in_orf": in_orf,
            }
        )
    return rows


def analyze(text: str, config: RunConfig, filename: str | None = None) -> dict:
    """Run every core step on raw input and return a plain result dict."""
    check_frame(config.frame)
    strand = Strand.parse(config.strand)
    warnings: List[str] = []

    is_fasta = looks_like_fasta(text, filename)
    identifier = extract_header_identifier(text) if is_fasta else None
    body = extract_fasta_body(text) if is_fasta else text

    seq_type = classify_sequence_type(body)
    if seq_type is SequenceType.AMINO_ACID:
        message = "Input looks like an amino-acid sequence; only A/T/G/C are used."
        LOGGER.warning(message)
        warnings.append(message)

    sequence = sanitize(body)
    LOGGER.info("Sanitized sequence: %s bases", len(sequence))

    whole = translate(sequence)
    framed = translate_framed(sequence, config.frame, strand)
    orf = find_orf(sequence, config.frame, strand)

    return {
        "name": config.name,
        "sequence": sequence,
        "sequence_type": seq_type.value,
        "pdb_id": identifier,
        "frame": config.frame,
        "strand": strand.value,
        "translation": whole.as_dict(),
        "framed_translation": framed.as_dict(),
        "orf": None
        if orf is None
        else {"start": orf.start, "end": orf.end, "has_stop": orf.has_stop},
        "composition": base_composition(sequence).as_dict(),
        "codons": codon_rows(tokenize(sequence, config.frame, strand), orf),
        "codon_usage": dict(codon_usage(sequence, config.frame, strand)),
        "aa_composition": dict(amino_acid_composition(framed.one_letter)),
        "protein_stats": protein_stats(framed.one_letter),
        "warnings": warnings,
    }


def run_pipeline(text: str, config: RunConfig, filename: str | None = None) -> dict:
    """Analyze ``text`` and export the reports under ``config.out_dir``."""
    result = analyze(text, config, filename)
    summary = {
        "name": result["name"],
        "length": len(result["sequence"]),
        "protein_length": len(result["framed_translation"]["one_letter"]),
        "sequence_type": result["sequence_type"],
        "pdb_id": result["pdb_id"],
        "paths": {},
        "result": result,
    }
    if not config.export:
        return summary
    if not result["sequence"]:
        LOGGER.warning("No nucleotide sequence left after sanitizing; nothing exported.")
        return summary

    out_dir = config.out_dir
    proteins = [
        {
            "header": f"{result['name']} whole-sequence translation",
            "sequence": result["translation"]["one_letter"],
        },
        {
            "header": f"{result['name']} frame={result['frame']} strand={result['strand']}",
            "sequence": result["framed_translation"]["one_letter"],
        },
    ]
    features = {"name": result["name"], **compute_features(result["sequence"])}
    features.update(result["protein_stats"])
    summary_row = {
        key: value for key, value in result.items() if key not in ("sequence", "codons")
    }

    paths = {
        "protein": write_fasta(
            [record for record in proteins if record["sequence"]],
            out_dir / "protein.fasta",
        ),
        "codon_usage": write_csv(
            histogram_rows(result["codon_usage"], "codon"),
            out_dir / "codon_usage.csv",
            columns=["codon", "count", "relative"],
        ),
        "aa_composition": write_csv(
            histogram_rows(result["aa_composition"], "amino_acid"),
            out_dir / "aa_composition.csv",
            columns=["amino_acid", "count", "relative"],
        ),
        "codons": write_csv(
            result["codons"],
            out_dir / "codons.csv",
            columns=["index", "codon", "class", "amino_acid", "in_orf"],
        ),
        "features": write_csv([features], out_dir / "features.csv"),
        "summary": write_jsonl([summary_row], out_dir / "summary.jsonl"),
    }
    summary["paths"] = {label: str(path) for label, path in paths.items()}
    return summary
