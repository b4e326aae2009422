"""In-memory identifier allocation for normalization tables."""


class KeyCache:
    """Map distinct strings to integer ids allocated in increasing order.

    Package names and directory prefixes repeat thousands of times per
    Contents file. The cache tells the loader whether a key is new, in which
    case its normalization row must be written before any row referencing it.

    Ids start at 1 and are never reused or reassigned. Not thread-safe.
    """

    def __init__(self):
        self._ids: dict[str, int] = {}
        self.max_id = 0

    def lookup(self, key: str) -> int | None:
        """Return the id of a known key, or None. Never allocates."""
        return self._ids.get(key)

    def allocate(self, key: str) -> int:
        """Allocate the next id for a key that lookup() did not know."""
        if key in self._ids:
            raise ValueError(f"Key already has id {self._ids[key]}: {key!r}")
        self.max_id += 1
        self._ids[key] = self.max_id
        return self.max_id

    def __contains__(self, key: str) -> bool:
        return key in self._ids

    def __len__(self) -> int:
        return len(self._ids)
