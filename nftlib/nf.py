from typing import List

from .errors import InvalidResponseError, MissingFieldError, NotFoundError, UnsupportedOperationError
from .models import NftChain, NftSet, NftTable
from .nfbackends import NFTBackend, nf_backend_store
from .query import (
    INVALID_RESPONSE,
    find_object,
    find_objects,
    parse_ruleset,
    pluck,
    render_element,
    require,
)

INET_FAMILY = "inet"


def _backend(backend: NFTBackend = None) -> NFTBackend:
    return backend or nf_backend_store.current_backend

def nfc(args: List[str], *, backend: NFTBackend = None):
    _backend(backend).cmd(args)

def nfc_list(what: str, *, backend: NFTBackend = None):
    """ Run `nft -j list <what>` and return the `nftables` array """
    output = _backend(backend).cmd(["list", what], json=True)
    return parse_ruleset(output)


# === Argument Builders ===

def add_set_args(chain: NftChain, setname: str) -> List[str]:
    return ["add", "set", chain.family, chain.table, setname, "{ type ipv4_addr; }"]

def add_v6_set_args(chain: NftChain, setname: str) -> List[str]:
    if chain.family != INET_FAMILY:
        raise UnsupportedOperationError("family does not support ipv6")
    return ["add", "set", chain.family, chain.table, setname, "{ type ipv6_addr; }"]

def add_set_element_args(nftset: NftSet, address: str) -> List[str]:
    return ["add", "element", nftset.family, nftset.table, nftset.set, "{", address, "}"]

def delete_set_element_args(nftset: NftSet, address: str) -> List[str]:
    return ["delete", "element", nftset.family, nftset.table, nftset.set, "{", address, "}"]

def flush_set_args(nftset: NftSet) -> List[str]:
    return ["flush", "set", nftset.family, nftset.table, nftset.set]

def add_set_rule_input_args(chain: NftChain, setname: str) -> List[str]:
    return ["add", "rule", chain.family, chain.table, chain.chain, "ip", "saddr", f"@{setname}", "drop"]

def add_set_rule_output_args(chain: NftChain, setname: str) -> List[str]:
    return ["add", "rule", chain.family, chain.table, chain.chain, "ip", "daddr", "!=", f"@{setname}", "accept"]


# === Mutations ===

def add_set(chain: NftChain, setname: str, *, backend: NFTBackend = None):
    nfc(add_set_args(chain, setname), backend=backend)

def add_v6_set(chain: NftChain, setname: str, *, backend: NFTBackend = None):
    """ Only `inet` tables can hold ipv6_addr sets """
    nfc(add_v6_set_args(chain, setname), backend=backend)

def add_set_element(nftset: NftSet, address: str, *, backend: NFTBackend = None):
    nfc(add_set_element_args(nftset, address), backend=backend)

def delete_set_element(nftset: NftSet, address: str, *, backend: NFTBackend = None):
    nfc(delete_set_element_args(nftset, address), backend=backend)

def flush_set(nftset: NftSet, *, backend: NFTBackend = None):
    nfc(flush_set_args(nftset), backend=backend)

def add_set_rule_input(chain: NftChain, setname: str, *, backend: NFTBackend = None):
    """ Drop traffic coming from addresses in the set """
    nfc(add_set_rule_input_args(chain, setname), backend=backend)

def add_set_rule_output(chain: NftChain, setname: str, *, backend: NFTBackend = None):
    """ Accept traffic going to addresses that are not in the set """
    nfc(add_set_rule_output_args(chain, setname), backend=backend)


# === Queries ===

def get_chain_details(chainname: str, *, backend: NFTBackend = None) -> NftChain:
    ruleset = nfc_list("chains", backend=backend)

    chain = find_object(ruleset, "chain", name=chainname)
    if chain is None:
        raise NotFoundError("chain not found")

    return NftChain(
        family=require(chain, "family", "cannot get chain family"),
        table=require(chain, "table", "cannot get chain table"),
        hook=require(chain, "hook", "cannot get chain hook"),
        type=require(chain, "type", "cannot get chain type"),
        chain=chainname,
    )

def _chain_names(message: str, *, backend: NFTBackend = None, **match) -> List[str]:
    ruleset = nfc_list("chains", backend=backend)
    names = [str(name) for name in pluck(find_objects(ruleset, "chain", **match), "name")]
    if not names:
        raise NotFoundError(message)
    return names

def get_filter_chains(*, backend: NFTBackend = None) -> List[str]:
    return _chain_names("no filter chains found", type="filter", backend=backend)

def get_input_chains(*, backend: NFTBackend = None) -> List[str]:
    return _chain_names("no input hook chains found", hook="input", backend=backend)

def get_output_chains(*, backend: NFTBackend = None) -> List[str]:
    return _chain_names("no output hook chains found", hook="output", backend=backend)

def get_tables(*, backend: NFTBackend = None) -> List[str]:
    ruleset = nfc_list("tables", backend=backend)
    names = [str(name) for name in pluck(find_objects(ruleset, "table"), "name")]
    if not names:
        raise NotFoundError("no tables found")
    return names

def get_table_info(tablename: str, *, backend: NFTBackend = None) -> NftTable:
    ruleset = nfc_list("tables", backend=backend)

    table = find_object(ruleset, "table", name=tablename)
    if table is None:
        raise NotFoundError("table not found")

    family = require(table, "family", "cannot get table family")
    handle = require(table, "handle", "cannot get table handle")
    try:
        handle = int(handle)
    except (TypeError, ValueError) as e:
        raise MissingFieldError("cannot get table handle") from e

    return NftTable(table=tablename, family=family, handle=handle)

def list_set(setname: str, *, backend: NFTBackend = None) -> NftSet:
    ruleset = nfc_list("sets", backend=backend)

    metainfo = find_object(ruleset, "metainfo")
    version = require(metainfo, "version", INVALID_RESPONSE, error=InvalidResponseError)

    nftset = find_object(ruleset, "set", name=setname)
    table = require(nftset, "table", "cannot find table", error=NotFoundError)
    family = require(nftset, "family", "cannot find family")

    return NftSet(
        version=str(version),
        family=family,
        table=table,
        set=setname,
        elements=[render_element(e) for e in nftset.get("elem", [])],
    )
