from collections.abc import Iterator

from filecatalog.introspection.exceptions import OutOfRangeError


class ByteCursor:
    """Bounds-checked random-access reader over an immutable byte buffer."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)

    def __len__(self) -> int:
        return len(self._data)

    def byte_at(self, offset: int) -> int:
        self._check(offset, 1)
        return self._data[offset]

    def uint16_be_at(self, offset: int) -> int:
        self._check(offset, 2)
        return int.from_bytes(self._data[offset : offset + 2], "big")

    def uint32_be_at(self, offset: int) -> int:
        self._check(offset, 4)
        return int.from_bytes(self._data[offset : offset + 4], "big")

    def startswith(self, prefix: bytes) -> bool:
        return self._data.startswith(prefix)

    def find_all(self, marker: bytes, start: int = 0) -> Iterator[int]:
        """Yield start offsets of non-overlapping occurrences of marker, in order.

        The returned iterator is single-use; call again to rescan.
        """
        if not marker:
            raise ValueError("marker must not be empty")
        offset = self._data.find(marker, start)
        while offset != -1:
            yield offset
            offset = self._data.find(marker, offset + len(marker))

    def _check(self, offset: int, width: int) -> None:
        if offset < 0 or offset + width > len(self._data):
            raise OutOfRangeError(
                f"read of {width} byte(s) at offset {offset} exceeds buffer length {len(self._data)}"
            )
