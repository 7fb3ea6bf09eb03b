import logging

import typer
from typing_extensions import Annotated

from . import config, nf
from .nfbackends import make_backend, nf_backend_store
from .util import dump, protected

app = typer.Typer(no_args_is_help=True, add_completion=False)

state = { "json": False }


@app.callback()
def main(
    backend: Annotated[str, typer.Option(help="Executor: `process` runs the nft binary, `local` uses libnftables")] = config.NFTLIB_BACKEND,
    json: Annotated[bool, typer.Option("--json", help="Print results as JSON instead of YAML")] = False,
    debug: Annotated[bool, typer.Option(help="Log every nft command")] = config.DEBUG,
):
    """ Manage nftables sets and query tables/chains through nft """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format='%(asctime)s.%(msecs)03d %(levelname)s %(module)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S')

    try:
        nf_backend_store.set_backend(make_backend(backend))
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--backend")
    state["json"] = json


# === Mutations ===

@app.command("add-set")
@protected("Failed to add set")
def add_set(
    chain: str,
    setname: str,
    ipv6: Annotated[bool, typer.Option("--ipv6", help="Create an ipv6_addr set (inet tables only)")] = False,
):
    """ Create an address set in the table holding CHAIN """
    details = nf.get_chain_details(chain)
    if ipv6:
        nf.add_v6_set(details, setname)
    else:
        nf.add_set(details, setname)

@app.command("add-element")
@protected("Failed to add element")
def add_element(setname: str, address: str):
    nf.add_set_element(nf.list_set(setname), address)

@app.command("delete-element")
@protected("Failed to delete element")
def delete_element(setname: str, address: str):
    nf.delete_set_element(nf.list_set(setname), address)

@app.command("flush-set")
@protected("Failed to flush set")
def flush_set(setname: str):
    nf.flush_set(nf.list_set(setname))

@app.command("add-input-rule")
@protected("Failed to add rule")
def add_input_rule(chain: str, setname: str):
    """ Drop traffic from addresses in SETNAME """
    nf.add_set_rule_input(nf.get_chain_details(chain), setname)

@app.command("add-output-rule")
@protected("Failed to add rule")
def add_output_rule(chain: str, setname: str):
    """ Accept traffic to addresses not in SETNAME """
    nf.add_set_rule_output(nf.get_chain_details(chain), setname)


# === Queries ===

@app.command("chain")
@protected()
def chain(name: str):
    dump(nf.get_chain_details(name), as_json=state["json"])

@app.command("filter-chains")
@protected()
def filter_chains():
    dump(nf.get_filter_chains(), as_json=state["json"])

@app.command("input-chains")
@protected()
def input_chains():
    dump(nf.get_input_chains(), as_json=state["json"])

@app.command("output-chains")
@protected()
def output_chains():
    dump(nf.get_output_chains(), as_json=state["json"])

@app.command("tables")
@protected()
def tables():
    dump(nf.get_tables(), as_json=state["json"])

@app.command("table")
@protected()
def table(name: str):
    dump(nf.get_table_info(name), as_json=state["json"])

@app.command("set")
@protected()
def show_set(name: str):
    dump(nf.list_set(name), as_json=state["json"])

if __name__ == "__main__":
    app()
