""" Pytest fixtures: a fake nft executor and canned `nft -j list` output """

import json

import pytest

from nftlib.errors import NftExecutionError
from nftlib.nfbackends import NFTBackend


METAINFO = {"metainfo": {"version": "1.0.9", "release_name": "Old Doc Yak #3", "json_schema_version": 1}}


class FakeNFTBackend(NFTBackend):
    """ Records every command and answers listings from `responses` """

    def __init__(self, responses=None, fail=False):
        super().__init__()
        self.responses = responses or {}
        self.fail = fail
        self.calls = []

    def cmd(self, args, *, json=False):
        self.calls.append((list(args), json))
        if self.fail:
            raise NftExecutionError("Error: No such file or directory", args_list=list(args), returncode=1)
        if json:
            return self.responses.get(" ".join(args), "")
        return ""


def ruleset(*entries):
    return json.dumps({"nftables": [METAINFO, *entries]})


@pytest.fixture
def sets_output():
    return ruleset(
        {"set": {"family": "ip", "name": "other", "table": "nat", "type": "ipv4_addr", "handle": 3}},
        {"set": {
            "family": "inet", "name": "blocklist", "table": "filter", "type": "ipv4_addr", "handle": 4,
            "elem": ["10.0.0.3", "10.0.0.1", "192.168.1.7"],
        }},
    )


@pytest.fixture
def chains_output():
    return ruleset(
        {"chain": {"family": "inet", "table": "filter", "name": "INPUT", "handle": 1,
                   "type": "filter", "hook": "input", "prio": 0, "policy": "accept"}},
        {"chain": {"family": "inet", "table": "filter", "name": "OUTPUT", "handle": 2,
                   "type": "filter", "hook": "output", "prio": 0, "policy": "accept"}},
        {"chain": {"family": "ip", "table": "nat", "name": "nat_input", "handle": 1,
                   "type": "nat", "hook": "input", "prio": -100, "policy": "accept"}},
        {"chain": {"family": "inet", "table": "filter", "name": "blocked", "handle": 5}},
    )


@pytest.fixture
def tables_output():
    return ruleset(
        {"table": {"family": "inet", "name": "filter", "handle": 7}},
        {"table": {"family": "ip", "name": "nat", "handle": 12}},
    )


@pytest.fixture
def fake_backend(sets_output, chains_output, tables_output):
    return FakeNFTBackend({
        "list sets": sets_output,
        "list chains": chains_output,
        "list tables": tables_output,
    })
