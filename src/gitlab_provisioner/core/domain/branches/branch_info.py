from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class BranchInfo:
    name: str
    web_url: str = ""
    default: bool = False
    can_push: bool = False
    protected: bool = False
