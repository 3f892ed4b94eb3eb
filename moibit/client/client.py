"""
MOIBit API client.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, Union
from urllib.parse import urlencode

from moibit.client.decoding import Operation, decoder_for
from moibit.client.domain.entities import Credentials, SessionIdentity
from moibit.client.domain.filepath import FilePath
from moibit.client.domain.options import (
    apply_options,
    default_remove_request,
    default_write_request,
)
from moibit.client.infrastructure.config_loader import ConfigLoader
from moibit.client.infrastructure.transport import RequestsTransport
from moibit.client.session_handler import SessionHandler
from moibit.common.exceptions import InvalidPathError, NonOkResponseError
from moibit.common.models import (
    ClientConfig,
    PathRequest,
    ReadFileRequest,
    to_wire,
)

if TYPE_CHECKING:
    from pydantic import BaseModel

    from moibit.client.domain.options import RemoveOption, WriteOption
    from moibit.common.interfaces import ITransport, TransportResponse
    from moibit.common.models import FileDescriptor, FileVersionDescriptor

HTTP_OK = 200

PathArg = Union[FilePath, str]

logger = logging.getLogger(__name__)


def as_filepath(path: PathArg) -> FilePath:
    """Validate a raw path string, or pass a FilePath through."""
    if isinstance(path, FilePath):
        return path
    return FilePath.from_elements(path)


class Client:
    """Authenticated session with the MOIBit storage service.

    Construction performs the authentication exchange; if it fails no client
    is returned. After that, the session identity never changes and every
    request carries it as headers.
    """

    def __init__(
        self,
        signature: str,
        nonce: str,
        app_id: str | None = None,
        network_id: str | None = None,
        base_url: str | None = None,
        request_timeout: float | None = None,
        log_level: int | None = None,
        transport: ITransport | None = None,
    ):
        self.settings = ConfigLoader(
            ClientConfig(
                app_id=app_id,
                network_id=network_id,
                base_url=base_url,
                request_timeout=request_timeout,
                log_level=log_level,
            )
        )
        self.transport: ITransport = transport or RequestsTransport(timeout=self.settings.request_timeout)

        credentials = Credentials(signature=signature, nonce=nonce)
        handler = SessionHandler(self.settings.service_url("authenticate"), self.transport)
        try:
            public_key = handler.authenticate(credentials)
        except Exception:
            if transport is None:
                self.transport.close()
            raise

        self.identity = SessionIdentity(
            credentials=credentials,
            public_key=public_key,
            app_id=self.settings.app_id,
            network_id=self.settings.network_id,
            base_url=self.settings.base_url,
        )

    @property
    def public_key(self) -> str:
        return self.identity.public_key

    @property
    def app_id(self) -> str:
        return self.identity.app_id

    @property
    def network_id(self) -> str:
        return self.identity.network_id

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Client(public_key={self.public_key!r}, app_id={self.app_id!r}, network_id={self.network_id!r})"

    def _send(
        self,
        method: str,
        endpoint: str,
        request: BaseModel | None = None,
        query: dict[str, str] | None = None,
    ) -> TransportResponse:
        url = self.settings.service_url(endpoint)
        if query:
            url = f"{url}?{urlencode(query)}"

        headers = self.identity.headers()
        body = None
        if request is not None:
            body = json.dumps(to_wire(request)).encode()
            headers["Content-Type"] = "application/json"

        logger.debug("Dispatching %s %s", method, endpoint)
        return self.transport.send(method, url, headers, body)

    def _call(
        self,
        operation: Operation,
        method: str,
        request: BaseModel | None = None,
        query: dict[str, str] | None = None,
    ) -> Any:
        r = self._send(method, operation.value, request, query)
        return decoder_for(operation)(r.body, r.status_code)

    def read_file(self, path: PathArg, version: int = 0) -> bytes:
        """Read the raw contents of a file at the given version (0 is latest)."""
        fp = as_filepath(path)
        r = self._send("POST", Operation.READ_FILE.value, ReadFileRequest(file_name=fp.path, version=version))
        if r.status_code != HTTP_OK:
            logger.warning("Read of %s failed [HTTP %s]", fp, r.status_code)
            raise NonOkResponseError(r.status_code, r.body.decode("utf-8", errors="replace"))
        return r.body

    def write_file(self, data: bytes | str, name: PathArg, *options: WriteOption) -> list[FileDescriptor]:
        """Write data to a file and return the descriptors of the stored file.

        Options such as keep_previous() or replication_factor(n) refine the
        default request in the order given.
        """
        fp = as_filepath(name)
        if not fp.is_file:
            msg = f"cannot write to '{fp}': path does not point to a file"
            raise InvalidPathError(msg, element=fp.path)

        request = apply_options(default_write_request(data, fp.path), options)
        descriptors = self._call(Operation.WRITE_FILE, "POST", request)
        logger.info("Wrote %s (%s descriptors)", fp, len(descriptors))
        return descriptors

    def remove_file(self, path: PathArg, version: int = 0, *options: RemoveOption) -> None:
        """Remove, or with perform_restore() restore, a file version.

        Pass remove_directory() when the path names a directory.
        """
        fp = as_filepath(path)
        request = apply_options(default_remove_request(fp.path, version), options)
        if request.is_directory and fp.is_file:
            msg = f"cannot remove '{fp}' as a directory: path points to a file"
            raise InvalidPathError(msg, element=fp.path)

        self._call(Operation.REMOVE_FILE, "POST", request)
        logger.info("Removed %s (version %s, operation %s)", fp, version, request.operation_type)

    def list_files(self, path: PathArg = "/") -> list[FileDescriptor]:
        fp = as_filepath(path)
        if not fp.is_directory:
            msg = f"cannot list '{fp}': path does not point to a directory"
            raise InvalidPathError(msg, element=fp.path)
        return self._call(Operation.LIST_FILES, "POST", PathRequest(path=fp.path))

    def file_status(self, path: PathArg) -> FileDescriptor:
        """Status of a file. A missing file yields a descriptor whose exists() is False."""
        fp = as_filepath(path)
        return self._call(Operation.FILE_STATUS, "POST", PathRequest(path=fp.path))

    def file_versions(self, path: PathArg) -> list[FileVersionDescriptor]:
        fp = as_filepath(path)
        return self._call(Operation.FILE_VERSIONS, "POST", PathRequest(path=fp.path))

    def make_directory(self, path: PathArg) -> None:
        """Create a directory. The service may reject paths that already exist."""
        fp = as_filepath(path)
        if not fp.is_directory:
            msg = f"cannot make directory '{fp}': path points to a file"
            raise InvalidPathError(msg, element=fp.path)
        self._call(Operation.MAKE_DIRECTORY, "GET", query={"path": fp.path})
        logger.info("Created directory %s", fp)
