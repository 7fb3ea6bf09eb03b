import subprocess
from typing import List, Union

from .. import config
from .base import NFTBackend


class ProcessNFTBackend(NFTBackend):
    """ Runs the `nft` executable, one process per command """

    def __init__(self, binary: str = None):
        super().__init__()
        self.binary = binary or config.NFT_BINARY

    def cmd(self, args: List[str], *, json: bool = False) -> Union[str, bytes]:
        self._log_cmd(args, json)

        argv = [self.binary]
        if json:
            argv.append("-j")
        argv.extend(args)

        # stdout stays raw bytes; decoding it is part of parsing the listing
        try:
            return subprocess.run(argv, capture_output=True, check=True).stdout
        except subprocess.CalledProcessError as e:
            stderr = e.stderr or b""
            if isinstance(stderr, bytes):
                stderr = stderr.decode("utf-8", errors="replace")
            stderr = stderr.strip()
            self._fail(args, stderr or f"{self.binary} exited with status {e.returncode}",
                returncode=e.returncode, stderr=stderr, cause=e)
        except OSError as e:
            self._fail(args, f"cannot run {self.binary}: {e}", cause=e)
