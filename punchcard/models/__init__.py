from punchcard.models.user import User
from punchcard.models.event import Event
from punchcard.models.scan import Scan
from punchcard.models.enums import EventType
