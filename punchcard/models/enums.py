from enum import Enum


class EventType(Enum):
    SOCIALIZE = "socialize"
    LEARN = "learn"
    SERVE = "serve"
    DISCOVER = "discover"
    CONNECT = "connect"

    @classmethod
    def values(cls):
        return [member.value for member in cls]
