from punchcard.repositories.user_repository import UserRepository
from punchcard.repositories.event_repository import EventRepository
from punchcard.repositories.scan_repository import ScanRepository
