import logging

from punchcard.exceptions import NoUserError
from punchcard.models import User
from punchcard.repositories import UserRepository
from punchcard.utils.validation import require_fields

logger = logging.getLogger(__name__)


class UserService:
    @staticmethod
    def attempt_login(data) -> User:
        # Identity is the client-supplied netId; there is no credential check.
        require_fields(data, ["netId"])
        net_id = str(data["netId"]).strip()

        user = UserRepository.find_by_net_id(net_id)
        if not user:
            logger.warning(f"Login attempt with unknown netId: {net_id}")
            raise NoUserError()

        logger.info(f"User logged in successfully: {net_id}")
        return user
