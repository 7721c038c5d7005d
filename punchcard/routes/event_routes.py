from flask import Blueprint, Response, current_app, request
from punchcard.exceptions import ApiError
from punchcard.routes.responses import error_response, success, unexpected_error
from punchcard.services import (
    AttendanceService,
    EligibilityService,
    EventService,
    SummaryService,
)
from punchcard.services.eligibility import RAFFLE_CSV_FILENAME

event_bp = Blueprint("event", __name__)


@event_bp.route("/GetUserAttendance/<net_id>", methods=["GET"])
def get_user_attendance(net_id):
    current_app.logger.info(f"User attendance for {net_id}")
    try:
        scans, events = AttendanceService.get_user_attendance(net_id)
        return success(
            scans=[scan.to_dict() for scan in scans],
            events=[event.to_dict() for event in events],
        )
    except Exception as e:
        return unexpected_error("User attendance", e)


@event_bp.route("/GetUserPunches/<net_id>", methods=["GET"])
def get_user_punches(net_id):
    current_app.logger.info(f"User punches for {net_id}")
    try:
        return success(punches=AttendanceService.get_user_punches(net_id))
    except Exception as e:
        return unexpected_error("User punches", e)


@event_bp.route("/GetUpcomingEvents", methods=["GET"])
def get_upcoming_events():
    current_app.logger.info("Upcoming events")
    try:
        events = EventService.get_upcoming_events()
        return success(events=[event.to_dict() for event in events])
    except Exception as e:
        return unexpected_error("Upcoming events", e)


@event_bp.route("/GetEventSummaries", methods=["GET"])
def get_event_summaries():
    current_app.logger.info("Event summaries")
    try:
        return success(eventSummaries=SummaryService.get_event_summaries())
    except Exception as e:
        return unexpected_error("Event summaries", e)


@event_bp.route("/StudentRaffle", methods=["GET"])
def student_raffle():
    current_app.logger.info("Student raffle")
    try:
        csv_body = EligibilityService.export_raffle_csv()
    except Exception as e:
        return unexpected_error("Student raffle", e)

    return Response(
        csv_body,
        mimetype="text/csv",
        headers={
            "Content-Disposition": f'attachment; filename="{RAFFLE_CSV_FILENAME}"'
        },
    )


@event_bp.route("/CreateEvent", methods=["POST"])
def create_event():
    current_app.logger.info("Create event")
    try:
        event = EventService.create_event(request.get_json(silent=True))
        return success(201, event=event.to_dict())
    except ApiError as e:
        return error_response(e)
    except Exception as e:
        return unexpected_error("Create event", e)
