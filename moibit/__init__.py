# MOIBit storage client

from moibit.client.client import Client
from moibit.client.domain.filepath import FilePath
from moibit.client.domain.options import (
    EncryptionType,
    apply_encryption,
    create_folders,
    create_only_file,
    keep_previous,
    perform_restore,
    provenance,
    remove_directory,
    replication_factor,
)
from moibit.common.exceptions import (
    AuthenticationError,
    DecodeError,
    InvalidPathError,
    MoiBitError,
    NonOkResponseError,
    TransportError,
)
from moibit.common.models import FileDescriptor, FileVersionDescriptor

__all__ = [
    "AuthenticationError",
    "Client",
    "DecodeError",
    "EncryptionType",
    "FileDescriptor",
    "FilePath",
    "FileVersionDescriptor",
    "InvalidPathError",
    "MoiBitError",
    "NonOkResponseError",
    "TransportError",
    "apply_encryption",
    "create_folders",
    "create_only_file",
    "keep_previous",
    "perform_restore",
    "provenance",
    "remove_directory",
    "replication_factor",
]
