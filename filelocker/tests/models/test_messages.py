from filelocker.models.messages import SecureMessage
from filelocker.models.responses import MessagesResponse


def make_message(message_id: int, viewed: str | None = None) -> SecureMessage:
    return SecureMessage.from_api(
        {
            "id": message_id,
            "ownerId": "Penny",
            "body": "Likes cats",
            "subject": "Doctor Claw",
            "messageRecipients": ["Brain"],
            "expirationDatetime": "07/11/2018",
            "viewedDatetime": viewed,
            "creationDatetime": "06/11/2018",
        }
    )


def test_from_api_maps_fields() -> None:
    message = make_message(777, viewed="06/11/2018")

    assert message.message_id == 777
    assert message.owner_id == "Penny"
    assert message.recipients == ("Brain",)
    assert message.created == "06/11/2018"
    assert message.is_viewed


def test_from_api_null_dates_become_empty() -> None:
    message = make_message(1)

    assert message.viewed == ""
    assert not message.is_viewed


def test_to_dict() -> None:
    assert make_message(1).to_dict() == {
        "id": 1,
        "owner_id": "Penny",
        "subject": "Doctor Claw",
        "body": "Likes cats",
        "created": "06/11/2018",
        "expiration": "07/11/2018",
        "viewed": "",
        "recipients": ["Brain"],
    }


def test_messages_flattens_groups_in_order() -> None:
    resp = MessagesResponse(
        message_groups=((make_message(1),), (make_message(2), make_message(3))),
    )

    assert len(resp.message_groups) == 2
    assert [m.message_id for m in resp.messages] == [1, 2, 3]
