"""File-related API endpoints (XML)."""

from typing import BinaryIO
from xml.etree.ElementTree import Element

import structlog

from filelocker.api.envelope import XML
from filelocker.api.http_client import HttpClient
from filelocker.exceptions import DecodeError
from filelocker.models.files import File
from filelocker.models.responses import FilesResponse, StatusResponse, UploadResponse

logger = structlog.get_logger(__name__)

LIST_ENDPOINT = "/file/get_user_file_list"
UPLOAD_ENDPOINT = "/file/upload"
DELETE_ENDPOINT = "/file/delete_files"


def list_files(http: HttpClient) -> FilesResponse:
    """
    List the user's uploaded files.

    Raises:
        RemoteError: If Filelocker reported errors; ``response`` holds what was decoded.
    """
    envelope = http.request(LIST_ENDPOINT, XML, data={"format": "cli"})
    response = FilesResponse(
        files=_decode_files(envelope.payload, endpoint=LIST_ENDPOINT),
        info_messages=envelope.info_messages,
        error_messages=envelope.error_messages,
    )
    envelope.raise_for_errors("listing files", endpoint=LIST_ENDPOINT, response=response)
    return response


def upload_file(
    http: HttpClient,
    name: str,
    content: bytes | BinaryIO,
    *,
    notes: str = "",
    scan: bool = False,
) -> UploadResponse:
    """
    Upload a file.

    The service needs the content length up front, so the content is read
    fully into memory and sent as a raw octet-stream body.

    Args:
        http: Logged-in HTTP client.
        name: File name as it will appear in Filelocker.
        content: File bytes or a binary file object.
        notes: File notes; the configured default is used when empty.
        scan: Ask the service to virus-scan the upload.

    Returns:
        Upload response with the created file record.

    Raises:
        RemoteError: If Filelocker reported errors.
    """
    body = content if isinstance(content, bytes) else content.read()

    params = {"format": "cli", "fileName": name}
    if scan:
        params["scanFile"] = "true"
    params["fileNotes"] = notes or http.config.default_upload_notes

    logger.debug("Uploading file", name=name, size=len(body), scan=scan)
    envelope = http.request(
        UPLOAD_ENDPOINT,
        XML,
        params=params,
        content=body,
        headers={
            "Content-Type": "application/octet-stream",
            "Content-Length": str(len(body)),
            "X-File-Name": name.encode(),
        },
    )

    files = _decode_files(envelope.payload, endpoint=UPLOAD_ENDPOINT)
    response = UploadResponse(
        file=files[0] if files else None,
        info_messages=envelope.info_messages,
        error_messages=envelope.error_messages,
    )
    envelope.raise_for_errors("uploading file", endpoint=UPLOAD_ENDPOINT, response=response)
    return response


def delete_files(http: HttpClient, file_ids: list[str]) -> StatusResponse:
    """
    Delete files by id.

    Raises:
        AuthenticationError: If the client has no request origin.
        RemoteError: If Filelocker reported errors.
    """
    envelope = http.request(
        DELETE_ENDPOINT,
        XML,
        data={
            "format": "cli",
            "requestOrigin": http.require_origin(),
            "fileIds": ",".join(file_ids),
        },
    )
    response = StatusResponse(
        info_messages=envelope.info_messages,
        error_messages=envelope.error_messages,
    )
    envelope.raise_for_errors("deleting files", endpoint=DELETE_ENDPOINT, response=response)
    return response


def _decode_files(data: Element | None, *, endpoint: str) -> tuple[File, ...]:
    if data is None:
        return ()
    try:
        return tuple(File.from_element(el) for el in data.iterfind("file"))
    except ValueError as e:
        msg = f"Invalid file record: {e}"
        raise DecodeError(msg, endpoint=endpoint) from e
