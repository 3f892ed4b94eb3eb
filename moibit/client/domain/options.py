"""Domain layer: request modifiers for the file-mutating operations.

Each modifier is a function that takes a request model and returns a new one.
Modifiers are folded in order over the default request before it is
serialized, so later modifiers win.
"""

from __future__ import annotations

from enum import IntEnum
from functools import reduce
from typing import Callable, TypeVar

from moibit.common.models import RemoveFileRequest, WriteFileRequest

RequestT = TypeVar("RequestT", WriteFileRequest, RemoveFileRequest)

WriteOption = Callable[[WriteFileRequest], WriteFileRequest]
RemoveOption = Callable[[RemoveFileRequest], RemoveFileRequest]

OPERATION_DELETE = 0
OPERATION_RESTORE = 1


class EncryptionType(IntEnum):
    """Encryption schemes supported by MOIBit for stored files."""

    NO_ENCRYPTION = -1
    DEFAULT_NETWORK = 0
    DEVELOPER_KEY = 1
    END_USER_KEY = 2
    CUSTOM_KEY = 3
    MES = 4


def apply_options(request: RequestT, options: tuple[Callable[[RequestT], RequestT], ...]) -> RequestT:
    """Fold the given modifiers over a request, left to right."""
    return reduce(lambda current, option: option(current), options, request)


def default_write_request(data: bytes | str, name: str) -> WriteFileRequest:
    text = data.decode("utf-8") if isinstance(data, bytes) else data
    return WriteFileRequest(text=text, file_name=name)


def default_remove_request(path: str, version: int) -> RemoveFileRequest:
    return RemoveFileRequest(path=path, version=version)


def keep_previous() -> WriteOption:
    """Preserve the previous version when the file already exists."""
    return lambda request: request.model_copy(update={"keep_previous": True})


def create_folders() -> WriteOption:
    """Create any missing folders along the file's path."""
    return lambda request: request.model_copy(update={"create_folders": True})


def create_only_file() -> WriteOption:
    """Fail the write when a folder along the file's path is missing."""
    return lambda request: request.model_copy(update={"create_folders": False})


def provenance() -> WriteOption:
    """Record a proof of the file on the provenance network."""
    return lambda request: request.model_copy(update={"is_provenance": True})


def replication_factor(n: int) -> WriteOption:
    """Number of replicas to keep of the written file on its network."""
    if n < 1:
        msg = f"replication factor must be at least 1, got {n}"
        raise ValueError(msg)
    return lambda request: request.model_copy(update={"replication": n})


def apply_encryption(encryption: EncryptionType) -> WriteOption:
    """Select the encryption scheme. The network default leaves the field unset."""
    scheme = EncryptionType(encryption)
    value = None if scheme is EncryptionType.DEFAULT_NETWORK else int(scheme)
    return lambda request: request.model_copy(update={"encryption_type": value})


def remove_directory() -> RemoveOption:
    """Target a directory. The service rejects this for plain files."""
    return lambda request: request.model_copy(update={"is_directory": True})


def perform_restore() -> RemoveOption:
    """Restore the given version instead of deleting it."""
    return lambda request: request.model_copy(update={"operation_type": OPERATION_RESTORE})
