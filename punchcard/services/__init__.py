from punchcard.services.user_service import UserService
from punchcard.services.event_service import EventService
from punchcard.services.scan_service import ScanService
from punchcard.services.attendance_service import AttendanceService
from punchcard.services.summary_service import SummaryService
from punchcard.services.eligibility import EligibilityService
