from .errors import (
    InvalidResponseError,
    MissingFieldError,
    NftError,
    NftExecutionError,
    NotFoundError,
    UnsupportedOperationError,
)
from .models import NftChain, NftSet, NftTable
from .nfbackends import NFTBackend, ProcessNFTBackend, nf_backend_store
from .nf import (
    add_set,
    add_set_element,
    add_set_rule_input,
    add_set_rule_output,
    add_v6_set,
    delete_set_element,
    flush_set,
    get_chain_details,
    get_filter_chains,
    get_input_chains,
    get_output_chains,
    get_table_info,
    get_tables,
    list_set,
)
