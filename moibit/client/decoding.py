"""
Response decoding strategies, selected per operation.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable

from pydantic import TypeAdapter, ValidationError

from moibit.common.exceptions import DecodeError, NonOkResponseError
from moibit.common.models import (
    Envelope,
    FileDescriptor,
    FileVersionDescriptor,
)

HTTP_OK = 200

logger = logging.getLogger(__name__)

Decoder = Callable[[bytes, int], Any]


class Operation(str, Enum):
    READ_FILE = "read_file"
    WRITE_FILE = "write_file"
    REMOVE_FILE = "remove_file"
    LIST_FILES = "list_files"
    FILE_STATUS = "file_status"
    FILE_VERSIONS = "file_versions"
    MAKE_DIRECTORY = "make_directory"


_DESCRIPTORS = TypeAdapter(list[FileDescriptor])
_VERSIONS = TypeAdapter(list[FileVersionDescriptor])
_STRINGS = TypeAdapter(list[str])


def decode_envelope(body: bytes, status_code: int) -> Envelope:
    """Decode the ``{meta, data}`` envelope and check the reported code.

    ``data`` is left undecoded so that a failure reported in ``meta`` is
    surfaced whatever shape the payload has.

    :raises DecodeError: If the body is not an envelope.
    :raises NonOkResponseError: If ``meta.code`` is not 200.
    """
    try:
        envelope = Envelope.model_validate_json(body)
    except ValidationError as err:
        raise DecodeError(str(err), "envelope", status_code) from err

    meta = envelope.meta
    if meta.code != HTTP_OK:
        logger.warning("Service reported failure %s: %s (request %s)", meta.code, meta.message, meta.request_id)
        raise NonOkResponseError(meta.code, meta.message, meta.request_id)
    return envelope


def _listing(adapter: TypeAdapter) -> Decoder:
    def decode(body: bytes, status_code: int) -> Any:
        envelope = decode_envelope(body, status_code)
        if envelope.data is None:
            return []
        try:
            return adapter.validate_python(envelope.data)
        except ValidationError as err:
            raise DecodeError(str(err), "data", status_code) from err

    return decode


def decode_ignore_data(body: bytes, status_code: int) -> None:
    """Check the envelope of an endpoint whose payload carries no result."""
    decode_envelope(body, status_code)


def decode_stringified_descriptors(body: bytes, status_code: int) -> list[FileDescriptor]:
    """Decode descriptors that arrive as JSON text inside a list of strings.

    The write endpoint returns ``data`` as ``["[{...}, ...]", ...]``: each
    string is the JSON encoding of a descriptor array. Arrays are
    concatenated in the order they appear.
    """
    envelope = decode_envelope(body, status_code)
    try:
        chunks = _STRINGS.validate_python(envelope.data)
    except ValidationError as err:
        raise DecodeError(str(err), "data", status_code) from err

    descriptors: list[FileDescriptor] = []
    for idx, chunk in enumerate(chunks):
        try:
            descriptors.extend(_DESCRIPTORS.validate_json(chunk))
        except ValidationError as err:
            raise DecodeError(str(err), f"data[{idx}]", status_code) from err
    return descriptors


def _decode_single_descriptor(body: bytes, status_code: int) -> FileDescriptor:
    envelope = decode_envelope(body, status_code)
    if envelope.data is None:
        # An absent payload means nothing is stored at the path
        return FileDescriptor()
    try:
        return FileDescriptor.model_validate(envelope.data)
    except ValidationError as err:
        raise DecodeError(str(err), "data", status_code) from err


_DECODERS: dict[Operation, Decoder] = {
    Operation.WRITE_FILE: decode_stringified_descriptors,
    Operation.REMOVE_FILE: decode_ignore_data,
    Operation.LIST_FILES: _listing(_DESCRIPTORS),
    Operation.FILE_STATUS: _decode_single_descriptor,
    Operation.FILE_VERSIONS: _listing(_VERSIONS),
    Operation.MAKE_DIRECTORY: decode_ignore_data,
}


def decoder_for(operation: Operation) -> Decoder:
    """Return the decode strategy for an operation's response."""
    try:
        return _DECODERS[operation]
    except KeyError as err:
        msg = f"No envelope decoder for operation '{operation.value}'"
        raise ValueError(msg) from err
