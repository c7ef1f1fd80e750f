import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class SearchRequest:
    term: str
    fields: Tuple[str, ...]
    categories: Tuple[str, ...] = ()
    wildcard: Optional[bool] = None
    case_sensitive: Optional[bool] = None

    def __post_init__(self):
        object.__setattr__(self, "fields", tuple(self.fields))
        object.__setattr__(self, "categories", tuple(self.categories or ()))

    def to_payload(self):
        # Unset options are left out entirely, never sent as null or false.
        payload: Dict[str, Any] = {
            "term": self.term,
            "fields": list(self.fields),
        }
        if self.categories:
            payload["categories"] = list(self.categories)
        if self.wildcard is not None:
            payload["wildcard"] = self.wildcard
        if self.case_sensitive is not None:
            payload["case_sensitive"] = self.case_sensitive
        return payload

    def to_json(self):
        return json.dumps(self.to_payload())

    @classmethod
    def from_payload(cls, value):
        if isinstance(value, cls):
            return value
        if not isinstance(value, dict):
            raise TypeError("Search request payload must be a dict or SearchRequest.")
        return cls(
            term=value["term"],
            fields=tuple(value["fields"]),
            categories=tuple(value.get("categories") or ()),
            wildcard=value.get("wildcard"),
            case_sensitive=value.get("case_sensitive"),
        )


@dataclass
class ExtractedResults:
    total: int = 0
    emails: List[str] = field(default_factory=list)
    passwords: List[str] = field(default_factory=list)


@dataclass
class RunSummary:
    output_path: str
    results: ExtractedResults
    max_results: int
    email_path: Optional[str] = None
    password_path: Optional[str] = None
