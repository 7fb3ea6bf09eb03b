import pytest

from nftlib import nf
from nftlib.errors import NftExecutionError, UnsupportedOperationError
from nftlib.models import NftChain, NftSet

from .conftest import FakeNFTBackend


INET_CHAIN = NftChain(table="filter", family="inet", chain="INPUT", hook="input", type="filter")
IP_CHAIN = NftChain(table="filter", family="ip", chain="INPUT", hook="input", type="filter")
BLOCKLIST = NftSet(table="filter", family="inet", version="1.0.9", set="blocklist")


@pytest.mark.parametrize("chain", [INET_CHAIN, IP_CHAIN])
def test_add_set_args(chain):
    assert nf.add_set_args(chain, "blocklist") == [
        "add", "set", chain.family, "filter", "blocklist", "{ type ipv4_addr; }",
    ]


def test_add_set_runs_command():
    backend = FakeNFTBackend()
    nf.add_set(IP_CHAIN, "blocklist", backend=backend)
    assert backend.calls == [(["add", "set", "ip", "filter", "blocklist", "{ type ipv4_addr; }"], False)]


def test_add_v6_set_on_inet():
    backend = FakeNFTBackend()
    nf.add_v6_set(INET_CHAIN, "blocklist6", backend=backend)
    assert backend.calls == [(["add", "set", "inet", "filter", "blocklist6", "{ type ipv6_addr; }"], False)]


def test_add_v6_set_rejects_non_inet_family_without_running_nft():
    backend = FakeNFTBackend()
    with pytest.raises(UnsupportedOperationError, match="family does not support ipv6"):
        nf.add_v6_set(IP_CHAIN, "blocklist6", backend=backend)
    assert backend.calls == []


def test_element_args():
    assert nf.add_set_element_args(BLOCKLIST, "10.1.2.3") == [
        "add", "element", "inet", "filter", "blocklist", "{", "10.1.2.3", "}",
    ]
    assert nf.delete_set_element_args(BLOCKLIST, "10.1.2.3") == [
        "delete", "element", "inet", "filter", "blocklist", "{", "10.1.2.3", "}",
    ]


def test_flush_set():
    backend = FakeNFTBackend()
    nf.flush_set(BLOCKLIST, backend=backend)
    assert backend.calls == [(["flush", "set", "inet", "filter", "blocklist"], False)]


def test_rule_args():
    assert nf.add_set_rule_input_args(INET_CHAIN, "blocklist") == [
        "add", "rule", "inet", "filter", "INPUT", "ip", "saddr", "@blocklist", "drop",
    ]
    assert nf.add_set_rule_output_args(INET_CHAIN, "allowlist") == [
        "add", "rule", "inet", "filter", "INPUT", "ip", "daddr", "!=", "@allowlist", "accept",
    ]


def test_addresses_are_passed_through_unvalidated():
    backend = FakeNFTBackend()
    nf.add_set_element(BLOCKLIST, "not-an-address", backend=backend)
    assert backend.calls[0][0][6] == "not-an-address"


def test_execution_errors_propagate():
    backend = FakeNFTBackend(fail=True)
    with pytest.raises(NftExecutionError):
        nf.delete_set_element(BLOCKLIST, "10.1.2.3", backend=backend)
    assert len(backend.calls) == 1
