from typing import List

from nftables import Nftables

from .base import NFTBackend


class LocalNFTBackend(NFTBackend):
    """ Runs commands in-process through libnftables """

    def __init__(self, nft: Nftables = None):
        super().__init__()
        self.nft = nft or Nftables()

    def cmd(self, args: List[str], *, json: bool = False) -> str:
        self._log_cmd(args, json)

        # Like the nft CLI, argv is joined with spaces and parsed as one command line.
        # The JSON output flag lives on the libnftables context.
        with self:
            self.nft.set_json_output(json)
            rc, output, error = self.nft.cmd(" ".join(args))

        if rc != 0:
            error = (error or "").strip()
            self._fail(args, error or f"libnftables returned {rc}", returncode=rc, stderr=error)

        return output or ""
