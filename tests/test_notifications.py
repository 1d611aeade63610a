import pytest
from firebase_admin import exceptions, messaging


def test_send_notification_success(client, mock_send, sample_notification_data):
    """Test successful notification dispatch."""
    mock_send.return_value = "projects/demo/messages/0:1700000000000000%abc"

    response = client.post("/send-notification", json=sample_notification_data)

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "response": "projects/demo/messages/0:1700000000000000%abc"
    }

    message = mock_send.call_args.args[0]
    assert isinstance(message, messaging.Message)
    assert message.token == sample_notification_data["fcmToken"]
    assert message.notification.title == sample_notification_data["title"]
    assert message.notification.body == sample_notification_data["body"]


def test_send_notification_provider_error(client, mock_send, sample_notification_data):
    """Test the FCM error message is surfaced to the caller."""
    mock_send.side_effect = exceptions.InvalidArgumentError(
        "The registration token is not a valid FCM registration token"
    )

    response = client.post("/send-notification", json=sample_notification_data)

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "The registration token is not a valid FCM registration token"
    }


def test_send_notification_sdk_value_error(client, mock_send, sample_notification_data):
    mock_send.side_effect = ValueError("Malformed message")

    response = client.post("/send-notification", json=sample_notification_data)

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Malformed message"}


@pytest.mark.parametrize("missing", ["title", "body", "fcmToken"])
def test_send_notification_missing_field(client, mock_send, sample_notification_data, missing):
    """Test notification request with a missing field."""
    payload = dict(sample_notification_data)
    del payload[missing]

    response = client.post("/send-notification", json=payload)

    assert response.status_code == 400
    data = response.json()
    assert data["success"] is False
    assert missing in data["error"]
    mock_send.assert_not_called()


def test_send_notification_empty_token(client, mock_send, sample_notification_data):
    payload = dict(sample_notification_data, fcmToken="")

    response = client.post("/send-notification", json=payload)

    assert response.status_code == 400
    assert response.json()["success"] is False
    mock_send.assert_not_called()


def test_send_notification_is_not_retried(client, mock_send, sample_notification_data):
    mock_send.side_effect = exceptions.UnavailableError("FCM unavailable")

    client.post("/send-notification", json=sample_notification_data)

    assert mock_send.call_count == 1


def test_send_notification_missing_body_names_field(client, mock_send, sample_notification_data):
    """Test the error names the "body" field rather than the request body."""
    payload = dict(sample_notification_data)
    del payload["body"]

    response = client.post("/send-notification", json=payload)

    assert response.status_code == 400
    assert response.json()["error"].startswith("body: ")
    mock_send.assert_not_called()
