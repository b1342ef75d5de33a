import pytest

from dna_translator.translator import (
    OrfSpan,
    Translation,
    find_orf,
    translate,
    translate_framed,
)
from dna_translator.utils_seq import Strand, reverse_complement


def test_translate_stops_before_stop_codon():
    result = translate("ATGAAATAG")
    assert result.one_letter == "MK"
    assert result.three_letter == "Met-Lys"


def test_translate_without_start_codon_is_empty():
    assert translate("CCCAAATAG") == Translation("", "")
    assert not translate("")


def test_translate_runs_to_last_complete_codon():
    assert translate("ATGGGGCC").one_letter == "MG"


def test_translate_starts_at_first_atg_regardless_of_phase():
    assert translate("CATGAAATAG").one_letter == "MK"


def test_translate_sanitizes_raw_text():
    assert translate("atg aaa\ntag").one_letter == "MK"


@pytest.mark.parametrize(
    "seq",
    ["ATGTAA", "ATGTGATAG", "TTTATGCCCTAGATGAAA", "ATGAAATGAAAATAA", "GATGATGATGA"],
)
def test_no_stop_symbol_in_output(seq):
    assert "*" not in translate(seq).one_letter
    for frame in (0, 1, 2):
        for strand in Strand:
            assert "*" not in translate_framed(seq, frame, strand).one_letter


def test_framed_searches_codon_stream():
    seq = "CATGAAATAG"
    assert translate_framed(seq, 0).one_letter == ""
    assert translate_framed(seq, 1).one_letter == "MK"


def test_framed_reverse_strand():
    seq = reverse_complement("ATGAAATAG")
    assert translate_framed(seq, 0, Strand.REVERSE).one_letter == "MK"
    assert translate_framed(seq, 0, "-").three_letter == "Met-Lys"


def test_variants_can_disagree_on_start_codon():
    # Character search finds the ATG at index 1; frame 0 codons are
    # CAT GCC ATG GGT AA, so the framed variant starts at codon 2.
    seq = "CATGCCATGGGTAA"
    assert translate(seq).one_letter == "MPWV"
    assert translate_framed(seq, 0).one_letter == "MG"


def test_find_orf_with_stop():
    assert find_orf("ATGAAATAG") == OrfSpan(0, 2, True)


def test_find_orf_without_stop():
    span = find_orf("CCCATGAAA")
    assert span == OrfSpan(1, 3, False)
    assert len(span) == 2


def test_find_orf_without_start():
    assert find_orf("CCCAAA") is None


def test_find_orf_stops_at_first_in_frame_stop():
    assert find_orf("CCCATGAAATGACCCTAA") == OrfSpan(1, 3, True)


def test_translation_as_dict():
    assert translate("ATGAAATAG").as_dict() == {"one_letter": "MK", "three_letter": "Met-Lys"}
