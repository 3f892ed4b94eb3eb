import json

import pytest

from moibit.client.client import Client
from moibit.client.domain.filepath import FilePath
from moibit.client.domain.options import (
    keep_previous,
    perform_restore,
    remove_directory,
    replication_factor,
)
from moibit.common.exceptions import (
    AuthenticationError,
    DecodeError,
    InvalidPathError,
    NonOkResponseError,
    TransportError,
)
from moibit.common.interfaces import TransportResponse

from .conftest import BASE_URL, PUBLIC_KEY, FakeTransport, auth_response, envelope

REQUIRED_HEADERS = {
    "nonce": "nonce-456",
    "signature": "sig-123",
    "developerKey": PUBLIC_KEY,
    "networkID": "net-1",
    "appID": "app-1",
}


def _make_client(transport: FakeTransport) -> Client:
    return Client("sig-123", "nonce-456", base_url=BASE_URL, transport=transport)


def test_authentication_sends_only_credentials(client: Client, transport: FakeTransport) -> None:
    """Test the auth exchange and the resolved identity."""
    auth = transport.sent[0]
    assert auth.method == "POST"
    assert auth.url == f"{BASE_URL}/authenticate"
    assert auth.headers == {"nonce": "nonce-456", "signature": "sig-123"}
    assert auth.body is None

    assert client.public_key == PUBLIC_KEY
    assert client.app_id == "app-1"
    assert client.network_id == "net-1"


def test_identity_is_immutable(client: Client) -> None:
    with pytest.raises(AttributeError):
        client.identity.public_key = "other"  # type: ignore[misc]


def test_authentication_non_200_status() -> None:
    transport = FakeTransport()
    transport.queue(b"forbidden", status_code=403)
    with pytest.raises(AuthenticationError) as exc_info:
        _make_client(transport)
    assert exc_info.value.status_code == 403  # noqa: PLR2004


def test_authentication_malformed_body() -> None:
    transport = FakeTransport()
    transport.queue(b"{not json")
    with pytest.raises(AuthenticationError, match="decode failed"):
        _make_client(transport)


def test_authentication_without_address() -> None:
    transport = FakeTransport()
    transport.queue(envelope({"address": ""}))
    with pytest.raises(AuthenticationError, match="no developer address"):
        _make_client(transport)


def test_authentication_non_ok_meta() -> None:
    transport = FakeTransport()
    transport.queue(envelope({"address": "0x1"}, code=401, message="bad signature"))
    with pytest.raises(AuthenticationError, match="bad signature"):
        _make_client(transport)


def test_authentication_rejection_without_payload() -> None:
    transport = FakeTransport()
    transport.queue(envelope(None, code=401, message="bad sig"))
    with pytest.raises(AuthenticationError, match="bad sig") as exc_info:
        _make_client(transport)
    assert exc_info.value.status_code == 401  # noqa: PLR2004
    assert "decode failed" not in str(exc_info.value)


def test_authentication_transport_failure() -> None:
    class Unreachable(FakeTransport):
        def send(self, method, url, headers, body=None):  # type: ignore[no-untyped-def]
            raise TransportError("request failed: connection refused", url=url)

    with pytest.raises(TransportError):
        _make_client(Unreachable())


def test_default_network_applied(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MOIBIT_NETWORK_ID", raising=False)
    monkeypatch.delenv("MOIBIT_APP_ID", raising=False)
    transport = FakeTransport(responses=[auth_response()])
    client = _make_client(transport)
    assert client.network_id == "12D3KooWSMAGyrB9TG45AAWaQNJmMdfJpnLQ5e1XM21hkm3FokHk"
    assert client.app_id == ""


def test_write_file(client: Client, transport: FakeTransport) -> None:
    transport.queue(envelope([json.dumps([{"hash": "abc", "path": "/data/hello.txt"}])]))

    result = client.write_file(b"hello", FilePath("data", "hello.txt"), keep_previous(), replication_factor(2))

    assert [fd.hash for fd in result] == ["abc"]
    sent = transport.last
    assert sent.method == "POST"
    assert sent.url == f"{BASE_URL}/writetexttofile"
    assert sent.headers["Content-Type"] == "application/json"
    for key, value in REQUIRED_HEADERS.items():
        assert sent.headers[key] == value
    assert sent.json() == {
        "text": "hello",
        "fileName": "/data/hello.txt",
        "keepPrevious": True,
        "createFolders": True,
        "isProvenance": False,
        "replication": 2,
    }


def test_write_file_requires_file_path(client: Client, transport: FakeTransport) -> None:
    with pytest.raises(InvalidPathError):
        client.write_file(b"x", "data/devices")
    assert len(transport.sent) == 1


def test_write_file_rejects_malformed_raw_path(client: Client, transport: FakeTransport) -> None:
    with pytest.raises(InvalidPathError):
        client.write_file(b"x", "data.v1/hello.txt")
    assert len(transport.sent) == 1


def test_write_file_server_failure(client: Client, transport: FakeTransport) -> None:
    transport.queue(envelope(None, code=500, message="disk full"))
    with pytest.raises(NonOkResponseError) as exc_info:
        client.write_file("text", "/a.txt")
    assert exc_info.value.code == 500  # noqa: PLR2004
    assert exc_info.value.message == "disk full"


def test_read_file(client: Client, transport: FakeTransport) -> None:
    transport.queue(b"raw file bytes")
    assert client.read_file("/data/hello.txt", version=2) == b"raw file bytes"
    assert transport.last.url == f"{BASE_URL}/readfile"
    assert transport.last.json() == {"fileName": "/data/hello.txt", "version": 2}


def test_read_file_non_200(client: Client, transport: FakeTransport) -> None:
    transport.queue(b"not found", status_code=404)
    with pytest.raises(NonOkResponseError) as exc_info:
        client.read_file("/missing.txt")
    assert exc_info.value.code == 404  # noqa: PLR2004


def test_list_files(client: Client, transport: FakeTransport) -> None:
    transport.queue(envelope([{"path": "/data/a.txt", "hash": "h"}, {"path": "/data/sub", "isDir": True}]))
    result = client.list_files(FilePath("data"))
    assert [fd.path for fd in result] == ["/data/a.txt", "/data/sub"]
    assert transport.last.url == f"{BASE_URL}/listfiles"
    assert transport.last.json() == {"path": "/data"}


def test_list_files_defaults_to_root(client: Client, transport: FakeTransport) -> None:
    transport.queue(envelope([]))
    assert client.list_files() == []
    assert transport.last.json() == {"path": "/"}


def test_list_files_rejects_file(client: Client) -> None:
    with pytest.raises(InvalidPathError):
        client.list_files("data/a.txt")


def test_file_status_not_found_is_not_an_error(client: Client, transport: FakeTransport) -> None:
    transport.queue(envelope({"hash": "", "isDir": False}))
    status = client.file_status("/data/missing.txt")
    assert not status.exists()
    assert transport.last.url == f"{BASE_URL}/filestatus"


def test_file_versions(client: Client, transport: FakeTransport) -> None:
    transport.queue(envelope([{"version": 1, "hash": "h1"}, {"version": 2, "hash": "h2"}]))
    versions = client.file_versions("/data/a.txt")
    assert [v.version for v in versions] == [1, 2]
    assert transport.last.url == f"{BASE_URL}/fileversions"


def test_file_versions_decode_failure(client: Client, transport: FakeTransport) -> None:
    transport.queue(envelope({"version": 1}))
    with pytest.raises(DecodeError):
        client.file_versions("/data/a.txt")


def test_remove_file(client: Client, transport: FakeTransport) -> None:
    transport.queue(envelope("removed"))
    client.remove_file("/data", 0, remove_directory())
    assert transport.last.url == f"{BASE_URL}/remove"
    assert transport.last.json() == {"path": "/data", "version": 0, "isdir": True, "operationType": 0}


def test_restore_file(client: Client, transport: FakeTransport) -> None:
    transport.queue(envelope(None))
    client.remove_file("/data/a.txt", 3, perform_restore())
    assert transport.last.json()["operationType"] == 1


def test_remove_directory_mode_on_file_path(client: Client, transport: FakeTransport) -> None:
    with pytest.raises(InvalidPathError):
        client.remove_file("/data/a.txt", 0, remove_directory())
    assert len(transport.sent) == 1


def test_make_directory(client: Client, transport: FakeTransport) -> None:
    transport.queue(envelope(None))
    client.make_directory(FilePath("data", "new dir"))
    sent = transport.last
    assert sent.method == "GET"
    assert sent.url == f"{BASE_URL}/makedir?path=%2Fdata%2Fnew+dir"
    assert sent.body is None
    assert "Content-Type" not in sent.headers
    assert sent.headers["developerKey"] == PUBLIC_KEY


def test_make_directory_already_exists(client: Client, transport: FakeTransport) -> None:
    transport.queue(envelope(None, code=409, message="directory exists"))
    with pytest.raises(NonOkResponseError, match="directory exists"):
        client.make_directory("/data")


def test_transport_failure_propagates(client: Client, transport: FakeTransport) -> None:
    def fail(*args, **kwargs):  # type: ignore[no-untyped-def]
        raise TransportError("request failed: timeout")

    transport.send = fail  # type: ignore[method-assign]
    with pytest.raises(TransportError, match="timeout"):
        client.list_files("/")


def test_context_manager_closes_transport(transport: FakeTransport) -> None:
    with _make_client(transport) as client:
        assert client.public_key == PUBLIC_KEY
    assert transport.closed


def test_injected_transport_not_closed_on_auth_failure() -> None:
    transport = FakeTransport(responses=[TransportResponse(500, b"")])
    with pytest.raises(AuthenticationError):
        _make_client(transport)
    assert not transport.closed
