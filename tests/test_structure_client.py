import pytest
import requests

from dna_translator.structure_client import (
    StructureClient,
    StructureClientConfig,
    StructureRequestRejected,
    check_pdb_id,
    check_protein,
)

PDB_TEXT = "HEADER    TEST\nATOM      1  N   ALA A   1       0.000   1.204   0.000\nEND\n"


class FakeResponse:
    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class FakeSession:
    def __init__(self, response):
        self.response = response
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        return self.response


def _client(session, **overrides):
    config = StructureClientConfig(rate_limit_sec=0.0, **overrides)
    return StructureClient(config, session=session)


def test_short_protein_is_rejected_before_any_request():
    session = FakeSession(FakeResponse(PDB_TEXT))
    client = _client(session)
    with pytest.raises(StructureRequestRejected):
        client.predict_structure("MKV")
    assert session.calls == []


def test_unknown_symbols_are_rejected():
    with pytest.raises(StructureRequestRejected):
        check_protein("MKV?LLLLLLLL")
    with pytest.raises(StructureRequestRejected):
        check_protein("MKVLLLLLLLL*")


def test_check_protein_strips_whitespace():
    assert check_protein("mkvl llll\nll") == "MKVLLLLLLL"


def test_rejection_is_a_value_error():
    with pytest.raises(ValueError):
        check_pdb_id("nope")


def test_predict_structure_posts_sequence():
    session = FakeSession(FakeResponse(PDB_TEXT))
    client = _client(session, esmfold_url="https://fold.example/pdb/")
    assert client.predict_structure("MKVLAAGGHHWW") == PDB_TEXT
    method, url, kwargs = session.calls[0]
    assert method == "POST"
    assert url == "https://fold.example/pdb/"
    assert kwargs["data"] == "MKVLAAGGHHWW"


def test_fetch_pdb_builds_download_url():
    session = FakeSession(FakeResponse(PDB_TEXT))
    client = _client(session, rcsb_url="https://files.example/download/")
    assert client.fetch_pdb("1t15") == PDB_TEXT
    method, url, _ = session.calls[0]
    assert method == "GET"
    assert url == "https://files.example/download/1T15.pdb"


def test_http_errors_propagate():
    session = FakeSession(FakeResponse("", status_code=503))
    client = _client(session)
    with pytest.raises(requests.HTTPError):
        client.fetch_pdb("1T15")


def test_responses_are_cached(tmp_path):
    session = FakeSession(FakeResponse(PDB_TEXT))
    client = _client(session, cache_dir=tmp_path)
    client.fetch_pdb("1T15")
    assert client.fetch_pdb("1t15") == PDB_TEXT
    assert len(session.calls) == 1
    assert len(list(tmp_path.glob("*.pdb"))) == 1


def test_min_length_must_be_positive():
    with pytest.raises(ValueError):
        StructureClient(StructureClientConfig(min_length=0), session=FakeSession(None))
