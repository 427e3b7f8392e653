"""Raw byte buffers with typed element access."""

from __future__ import annotations

import struct


class Buffer:
    """A resizable block of bytes; ``data`` is ``None`` until allocated."""

    def __init__(self, size: int | None = None) -> None:
        self.data: bytearray | None = None
        if size is not None:
            self.allocate(size)

    @property
    def size(self) -> int:
        return 0 if self.data is None else len(self.data)

    def allocate(self, size: int) -> None:
        """Replace the contents with ``size`` zero bytes."""
        if size < 0:
            raise ValueError(f"buffer size must not be negative, got {size}")
        self.release()
        self.data = bytearray(size)

    def release(self) -> None:
        self.data = None

    def copy(self) -> Buffer:
        """Return an independent buffer holding the same bytes."""
        result = type(self)()
        if self.data is not None:
            result.data = bytearray(self.data)
        return result

    def _element_size(self, fmt: str) -> int:
        element = struct.calcsize(fmt)
        if self.size % element:
            raise ValueError(
                f"buffer size ({self.size} bytes) is not a multiple of the element size ({element} bytes)"
            )
        return element

    def _offset(self, fmt: str, index: int) -> int:
        element = self._element_size(fmt)
        if index < 0 or index * element >= self.size:
            raise IndexError(f"index {index} is out of bounds; buffer has {self.size // element} elements")
        return index * element

    def clear(self, fmt: str, value: object) -> None:
        """Fill every element of struct format ``fmt`` with ``value``."""
        element = self._element_size(fmt)
        if self.data is not None:
            self.data[:] = struct.pack(fmt, value) * (self.size // element)

    def at(self, fmt: str, index: int) -> object:
        """Return element ``index`` read with struct format ``fmt``."""
        offset = self._offset(fmt, index)
        return struct.unpack_from(fmt, self.data, offset)[0]

    def set(self, fmt: str, index: int, value: object) -> None:
        """Write ``value`` as element ``index`` with struct format ``fmt``."""
        offset = self._offset(fmt, index)
        struct.pack_into(fmt, self.data, offset, value)

    def __bool__(self) -> bool:
        return self.data is not None


class ScopedBuffer(Buffer):
    """A buffer released when its ``with`` block ends."""

    def __enter__(self) -> ScopedBuffer:
        return self

    def __exit__(self, *args: object) -> None:
        self.release()