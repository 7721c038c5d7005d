from typing import List
from punchcard.models import User


class UserRepository:
    @staticmethod
    def find_by_net_id(net_id: str) -> User:
        return User.query.filter_by(net_id=net_id).first()

    @staticmethod
    def find_by_net_ids(net_ids: List[str]) -> List[User]:
        if not net_ids:
            return []
        return User.query.filter(User.net_id.in_(net_ids)).order_by(User.net_id).all()
