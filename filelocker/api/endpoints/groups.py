"""Group-related API endpoints (XML)."""

from filelocker.api.envelope import XML
from filelocker.api.http_client import HttpClient
from filelocker.models.files import Group
from filelocker.models.responses import GroupsResponse

LIST_ENDPOINT = "/account/get_groups"


def list_groups(http: HttpClient) -> GroupsResponse:
    """List the user's groups."""
    envelope = http.request(LIST_ENDPOINT, XML, data={"format": "cli"})
    groups = () if envelope.payload is None else envelope.payload.iterfind("group")
    response = GroupsResponse(
        groups=tuple(Group.from_element(el) for el in groups),
        info_messages=envelope.info_messages,
        error_messages=envelope.error_messages,
    )
    envelope.raise_for_errors("listing groups", endpoint=LIST_ENDPOINT, response=response)
    return response
