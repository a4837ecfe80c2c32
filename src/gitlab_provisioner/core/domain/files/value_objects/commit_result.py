from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class CommitResult:
    id: str
    short_id: str = ""
    title: str = ""
    web_url: str = ""
