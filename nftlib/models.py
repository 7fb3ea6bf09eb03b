from dataclasses import asdict, dataclass, field
from typing import List


@dataclass
class NftSet:
    table: str
    family: str
    version: str
    set: str
    elements: List[str] = field(default_factory=list)

    def to_dict(self):
        return asdict(self)


@dataclass
class NftChain:
    table: str
    family: str
    chain: str
    hook: str = ""
    type: str = ""

    def to_dict(self):
        return asdict(self)


@dataclass
class NftTable:
    table: str
    family: str
    handle: int

    def to_dict(self):
        return asdict(self)
