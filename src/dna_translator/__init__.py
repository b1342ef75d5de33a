"""DNA to protein translation toolkit."""

from importlib.metadata import PackageNotFoundError, version

from .analytics import amino_acid_composition, codon_usage, estimate_molecular_weight
from .classifier import SequenceType, classify_sequence_type, extract_header_identifier
from .featurizer import base_composition, sanitize
from .translator import Translation, find_orf, translate, translate_framed
from .utils_seq import Strand, extract_fasta_body, reverse_complement, tokenize

try:
    __version__ = version("dna-translator")
except PackageNotFoundError:  # pragma: no cover - local dev
    __version__ = "0.0.0"

__all__ = [
    "SequenceType",
    "Strand",
    "Translation",
    "__version__",
    "amino_acid_composition",
    "base_composition",
    "classify_sequence_type",
    "codon_usage",
    "estimate_molecular_weight",
    "extract_fasta_body",
    "extract_header_identifier",
    "find_orf",
    "reverse_complement",
    "sanitize",
    "tokenize",
    "translate",
    "translate_framed",
]
