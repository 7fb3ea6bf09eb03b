import logging
import shlex
from threading import Lock
from typing import List, Union

from ..errors import NftExecutionError

logger = logging.getLogger(__name__)


class NFTBackend:
    """
    Runs nft commands given as argument lists.

    `cmd(args)` runs a command and returns nothing of interest.
    `cmd(args, json=True)` runs it with JSON output (`nft -j`) and returns stdout
    (str, or bytes for backends that capture it raw).
    Either raises `NftExecutionError` if nft could not run or exited non-zero.
    """

    def __init__(self):
        self._lock = Lock()

    def __enter__(self):
        self._lock.acquire()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self._lock.release()

    def cmd(self, args: List[str], *, json: bool = False) -> Union[str, bytes]:
        raise NotImplementedError()

    def _log_cmd(self, args: List[str], json: bool):
        logger.debug("NFT command: %s%s", "-j " if json else "", shlex.join(args))

    def _fail(self, args: List[str], message: str, *, returncode=None, stderr="", cause=None):
        logger.debug("NFT command failed: %s: %s", shlex.join(args), message)
        err = NftExecutionError(message, args_list=list(args), returncode=returncode, stderr=stderr)
        if cause is not None:
            raise err from cause
        raise err
