"""
Pydantic models for request/response validation.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WireModel(BaseModel):
    """Base for models exchanged with the service under camelCase field names."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ResponseMetadata(WireModel):
    code: int
    request_id: str = Field("", alias="requestID")
    message: str = ""


class Envelope(WireModel):
    """The ``{meta, data}`` wrapper returned by every endpoint."""

    meta: ResponseMetadata
    data: Any = None


class AuthData(WireModel):
    address: str = ""
    entropy: Any = None


class FileDescriptor(WireModel):
    """Server-side view of a file or directory."""

    active: bool = False
    enable: bool = False

    hash: str = ""
    version: int = 0
    replication: int = 0
    filesize: int = 0
    encryption_key: str = Field("", alias="encryptionKey")
    last_updated: str = Field("", alias="lastUpdated")

    is_directory: bool = Field(False, alias="isDir")
    directory: str = ""
    path: str = ""
    node_address: str = Field("", alias="nodeAddress")

    def exists(self) -> bool:
        """A directory always exists; a file exists once it has a content hash."""
        return self.is_directory or self.hash != ""


class FileVersionDescriptor(WireModel):
    """One entry of a file's version history."""

    version: int = 0
    hash: str = ""
    filesize: int = 0
    replication: int = 0
    encryption_key: str = Field("", alias="encryptionKey")
    last_updated: str = Field("", alias="lastUpdated")
    node_address: str = Field("", alias="nodeAddress")
    is_provenance: bool = Field(False, alias="isProvenance")
    active: bool = False
    enable: bool = False

    def exists(self) -> bool:
        return self.hash != ""


class ReadFileRequest(WireModel):
    file_name: str = Field(alias="fileName")
    version: int = 0


class WriteFileRequest(WireModel):
    text: str
    file_name: str = Field(alias="fileName")
    keep_previous: bool = Field(False, alias="keepPrevious")
    create_folders: bool = Field(True, alias="createFolders")
    is_provenance: bool = Field(False, alias="isProvenance")
    replication: int | None = None
    encryption_type: int | None = Field(None, alias="encryptionType")


class RemoveFileRequest(WireModel):
    path: str
    version: int = 0
    is_directory: bool = Field(False, alias="isdir")
    operation_type: int = Field(0, alias="operationType")


class PathRequest(WireModel):
    """Body shared by the list, status and version endpoints."""

    path: str


class ClientConfig(BaseModel):
    app_id: str | None = None
    network_id: str | None = None
    base_url: str | None = None
    request_timeout: float | None = Field(None, gt=0)
    log_level: int | None = None


def to_wire(request: BaseModel) -> dict[str, Any]:
    """Serialize a request model with wire names, dropping unset optionals."""
    return request.model_dump(by_alias=True, exclude_none=True)
