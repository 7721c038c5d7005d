import pytest

from punchcard.exceptions import MissingFieldsError, NoUserError
from punchcard.services import UserService


def test_login_returns_matching_user(make_user):
    make_user("abc123", first_name="Grace")

    user = UserService.attempt_login({"netId": "abc123"})

    assert user.net_id == "abc123"
    assert user.first_name == "Grace"


def test_login_unknown_net_id(make_user):
    make_user("abc123")

    with pytest.raises(NoUserError):
        UserService.attempt_login({"netId": "zzz999"})


@pytest.mark.parametrize("data", [None, {}, {"netId": ""}, {"netId": None}])
def test_login_requires_net_id(app, data):
    with pytest.raises(MissingFieldsError):
        UserService.attempt_login(data)
