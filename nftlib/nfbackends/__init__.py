from contextlib import contextmanager
from threading import Lock, local as thread_local

from .. import config
from .base import NFTBackend
from .process import ProcessNFTBackend


def make_backend(name: str = None) -> NFTBackend:
    name = name or config.NFTLIB_BACKEND
    if name == "process":
        return ProcessNFTBackend()
    if name == "local":
        from .local import LocalNFTBackend
        return LocalNFTBackend()
    raise ValueError(f"Unknown nft backend: {name}")


class NFTBackendStore:
    def __init__(self):
        self._lock = Lock()
        self._local = thread_local()
        self.global_backend: NFTBackend = None

    def set_backend(self, backend: NFTBackend):
        with self._lock:
            self.global_backend = backend

    @property
    def current_backend(self) -> NFTBackend:
        backend = getattr(self._local, "current_backend", None)
        if backend is not None:
            return backend

        with self._lock:
            if self.global_backend is None:
                self.global_backend = make_backend()
            return self.global_backend

    @contextmanager
    def with_backend(self, backend: NFTBackend):
        """ Use `backend` for calls made from this thread inside the block """
        previous = getattr(self._local, "current_backend", None)
        self._local.current_backend = backend
        try:
            yield backend
        finally:
            self._local.current_backend = previous

nf_backend_store = NFTBackendStore()
