"""FilePath — immutable, validated location in the MOIBit namespace."""

from __future__ import annotations

from moibit.common.exceptions import InvalidPathError

_PREFIX = "failed to construct filepath"

MULTIPLE_PERIODS = f"{_PREFIX}: multiple periods in final element"
SLASH_AFTER_PERIOD = f"{_PREFIX}: slash detected after period or missing extension"
MISSING_FILE_NAME = f"{_PREFIX}: missing file name"


def _clean(element: str) -> list[str]:
    """Split an element along slashes, discarding empty fragments."""
    return [part for part in element.split("/") if part]


def _parse(elements: tuple[str, ...]) -> tuple[tuple[str, ...], str]:
    segments: list[str] = []
    extension = ""
    last = len(elements) - 1

    for idx, element in enumerate(elements):
        if not isinstance(element, str):
            msg = f"path elements must be str, got {type(element).__name__} at index {idx}"
            raise TypeError(msg)

        # Only the final element may name a file
        if idx == last and "." in element:
            if element.count(".") > 1:
                raise InvalidPathError(MULTIPLE_PERIODS, idx, element)

            name, ext = element.split(".")
            ext_parts = _clean(ext)
            if len(ext_parts) != 1:
                raise InvalidPathError(SLASH_AFTER_PERIOD, idx, element)
            name_parts = _clean(name)
            if not name_parts:
                raise InvalidPathError(MISSING_FILE_NAME, idx, element)

            segments.extend(name_parts)
            extension = ext_parts[0]
            continue

        for part in _clean(element):
            if "." in part:
                raise InvalidPathError(
                    f"{_PREFIX}: non-final element '{idx}' contains period", idx, element
                )
            segments.append(part)

    return tuple(segments), extension


class FilePath:
    """An immutable path to a file or directory in MOIBit.

    Each element may itself hold several slash-separated levels; empty levels
    are dropped. The final element may carry a single period separating a file
    name from its extension, in which case the path points to a file.
    Otherwise it points to a directory. No elements at all means the root.

    :param elements: Raw path elements.
    :raises InvalidPathError: If any element breaks the rules above.
    """

    __slots__ = ("_segments", "_extension")

    def __init__(self, *elements: str) -> None:
        segments, extension = _parse(elements)
        object.__setattr__(self, "_segments", segments)
        object.__setattr__(self, "_extension", extension)

    @classmethod
    def from_elements(cls, *elements: str) -> FilePath:
        """Validating factory, equivalent to calling the constructor."""
        return cls(*elements)

    @classmethod
    def root(cls) -> FilePath:
        return cls()

    @classmethod
    def _build(cls, segments: tuple[str, ...], extension: str = "") -> FilePath:
        fp = object.__new__(cls)
        object.__setattr__(fp, "_segments", segments)
        object.__setattr__(fp, "_extension", extension)
        return fp

    @property
    def segments(self) -> tuple[str, ...]:
        """Path levels, excluding the extension."""
        return self._segments

    @property
    def extension(self) -> str:
        """File extension without the period, or empty string for directories."""
        return self._extension

    @property
    def name(self) -> str:
        """Final component including the extension; empty for the root."""
        if not self._segments:
            return ""
        if self.is_file:
            return f"{self._segments[-1]}.{self._extension}"
        return self._segments[-1]

    @property
    def path(self) -> str:
        rendered = "/" + "/".join(self._segments)
        if self.is_file:
            rendered += f".{self._extension}"
        return rendered

    @property
    def is_file(self) -> bool:
        return self._extension != ""

    @property
    def is_directory(self) -> bool:
        return self._extension == ""

    @property
    def is_root(self) -> bool:
        return self.is_directory and not self._segments

    @property
    def parent(self) -> FilePath:
        """Directory containing this path. The root is its own parent."""
        if self.is_directory and len(self._segments) <= 1:
            return FilePath._build(())
        return FilePath._build(self._segments[:-1])

    def grow(self, *elements: str) -> FilePath:
        """Return a new path extended by the given elements.

        The receiver is left untouched whether or not growth succeeds.

        :raises InvalidPathError: If this path points to a file or the new
            elements are invalid.
        """
        if self.is_file:
            msg = "cannot grow file path: already pointing to a file"
            raise InvalidPathError(msg, element=self.path)
        # Indices in errors refer to the new elements, not the joined path
        try:
            segments, extension = _parse(elements)
        except InvalidPathError as err:
            msg = f"cannot grow file path: bad elements: {err.reason}"
            raise InvalidPathError(msg, err.index, err.element) from err
        return self._build(self._segments + segments, extension)

    def __truediv__(self, other: str) -> FilePath:
        return self.grow(other)

    def __str__(self) -> str:
        return self.path

    def __repr__(self) -> str:
        return f"FilePath({self.path!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FilePath):
            return self._segments == other._segments and self._extension == other._extension
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._segments, self._extension))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"FilePath is immutable: cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"FilePath is immutable: cannot delete '{name}'")
