import io
from urllib.parse import parse_qs

import pytest

from filelocker.api.endpoints.files import (
    DELETE_ENDPOINT,
    LIST_ENDPOINT,
    UPLOAD_ENDPOINT,
    delete_files,
    list_files,
    upload_file,
)
from filelocker.api.http_client import HttpClient
from filelocker.config import FilelockerConfig
from filelocker.exceptions import AuthenticationError, DecodeError, RemoteError
from filelocker.models.files import File
from filelocker.tests.conftest import ORIGIN
from filelocker.tests.utils.mock_transport import MockTransport, xml_body

FILES_XML = (
    '<file id="11" name="report.pdf" size="2048" passedAvScan="true"/>'
    '<file id="12" name="notes.txt" size="17" passedAvScan="false"/>'
)


# list_files


def test_list_files_decodes_file_records(http: HttpClient, mock_transport: MockTransport) -> None:
    mock_transport.add_response(xml_body(data=FILES_XML))

    resp = list_files(http)

    request = mock_transport.last_request
    assert request.url.path == LIST_ENDPOINT
    assert request.content == b"format=cli"
    assert resp.files == (
        File(file_id="11", name="report.pdf", size=2048, passed_av_scan=True),
        File(file_id="12", name="notes.txt", size=17, passed_av_scan=False),
    )
    assert resp.ok


def test_list_files_info_messages_are_not_errors(
    http: HttpClient, mock_transport: MockTransport
) -> None:
    mock_transport.add_response(xml_body(info=("Quota at 90%",), data=FILES_XML))

    resp = list_files(http)

    assert resp.info_messages == ("Quota at 90%",)
    assert len(resp.files) == 2


def test_list_files_error_raises_with_partial_response(
    http: HttpClient, mock_transport: MockTransport
) -> None:
    mock_transport.add_response(xml_body(errors=("Session expired",), data=FILES_XML))

    with pytest.raises(RemoteError) as exc_info:
        list_files(http)

    error = exc_info.value
    assert error.endpoint == LIST_ENDPOINT
    assert error.error_messages == ("Session expired",)
    assert len(error.response.files) == 2


def test_list_files_bad_size_raises_decode_error(
    http: HttpClient, mock_transport: MockTransport
) -> None:
    mock_transport.add_response(xml_body(data='<file id="1" name="x" size="big"/>'))

    with pytest.raises(DecodeError):
        list_files(http)


# upload_file


def test_upload_file_sends_raw_body_with_metadata(
    http: HttpClient, mock_transport: MockTransport
) -> None:
    mock_transport.add_response(
        xml_body(info=("File uploaded",), data='<file id="42" name="hello.txt" size="5"/>')
    )

    resp = upload_file(http, "hello.txt", b"hello", notes="greeting", scan=True)

    request = mock_transport.last_request
    assert request.url.path == UPLOAD_ENDPOINT
    assert dict(request.url.params) == {
        "format": "cli",
        "fileName": "hello.txt",
        "scanFile": "true",
        "fileNotes": "greeting",
    }
    assert request.content == b"hello"
    assert request.headers["content-type"] == "application/octet-stream"
    assert request.headers["content-length"] == "5"
    assert request.headers["x-file-name"] == "hello.txt"
    assert request.headers["accept"] == "text/xml"
    assert resp.file == File(file_id="42", name="hello.txt", size=5)
    assert resp.info_messages == ("File uploaded",)


def test_upload_file_accepts_non_ascii_names(
    http: HttpClient, mock_transport: MockTransport
) -> None:
    mock_transport.add_response(xml_body(data='<file id="7" name="résumé.pdf"/>'))

    resp = upload_file(http, "résumé.pdf", b"abc")

    request = mock_transport.last_request
    file_names = [v for k, v in request.headers.raw if k.lower() == b"x-file-name"]
    assert file_names == ["résumé.pdf".encode()]
    assert request.url.params["fileName"] == "résumé.pdf"
    assert resp.file.name == "résumé.pdf"


def test_upload_file_reads_file_objects_and_uses_default_notes(
    http: HttpClient, mock_transport: MockTransport, config: FilelockerConfig
) -> None:
    mock_transport.add_response(xml_body(data='<file id="1" name="data.bin"/>'))

    upload_file(http, "data.bin", io.BytesIO(b"\x00\x01\x02"))

    request = mock_transport.last_request
    assert request.content == b"\x00\x01\x02"
    assert request.url.params["fileNotes"] == config.default_upload_notes
    assert "scanFile" not in request.url.params


def test_upload_file_error_raises(http: HttpClient, mock_transport: MockTransport) -> None:
    mock_transport.add_response(xml_body(errors=("Quota exceeded",)))

    with pytest.raises(RemoteError) as exc_info:
        upload_file(http, "big.iso", b"x")

    assert exc_info.value.response.file is None


# delete_files


def test_delete_files_sends_ids_and_origin(
    http: HttpClient, mock_transport: MockTransport
) -> None:
    mock_transport.add_response(xml_body(info=("Files deleted",)))

    resp = delete_files(http, ["11", "12"])

    request = mock_transport.last_request
    assert request.url.path == DELETE_ENDPOINT
    assert parse_qs(request.content.decode()) == {
        "format": ["cli"],
        "requestOrigin": [ORIGIN],
        "fileIds": ["11,12"],
    }
    assert resp.info_messages == ("Files deleted",)


def test_delete_files_error_raises(http: HttpClient, mock_transport: MockTransport) -> None:
    mock_transport.add_response(xml_body(errors=("No such file",)))

    with pytest.raises(RemoteError):
        delete_files(http, ["99"])


def test_delete_files_requires_origin(
    config: FilelockerConfig, mock_transport: MockTransport
) -> None:
    with HttpClient(config, transport=mock_transport) as client:
        with pytest.raises(AuthenticationError):
            delete_files(client, ["1"])

    assert mock_transport.requests == []
