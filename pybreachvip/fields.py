"""Searchable field names and comma-list normalization."""

FIELD_CATALOG = frozenset(
    {
        "email",
        "password",
        "domain",
        "username",
        "ip",
        "name",
        "uuid",
        "steamid",
        "phone",
        "discordid",
    }
)


def is_valid_field(name):
    return name in FIELD_CATALOG


def normalize_list(raw):
    """Split ``raw`` on commas into trimmed, lowercased, non-empty entries."""
    if not raw:
        return []
    normalized = []
    for segment in raw.split(","):
        value = segment.strip()
        if value:
            normalized.append(value.lower())
    return normalized
