from flask import Blueprint, current_app, request
from punchcard.exceptions import ApiError
from punchcard.routes.responses import error_response, success, unexpected_error
from punchcard.services import ScanService

scan_bp = Blueprint("scan", __name__)


@scan_bp.route("/GetScans", methods=["GET"])
def get_scans():
    current_app.logger.info("Get scans")
    try:
        scans = ScanService.get_scans()
        return success(scans=[scan.to_dict() for scan in scans])
    except Exception as e:
        return unexpected_error("Get scans", e)


@scan_bp.route("/InsertScan", methods=["POST"])
def insert_scan():
    current_app.logger.info("Insert scan")
    try:
        ScanService.insert_scan(request.get_json(silent=True))
        return success()
    except ApiError as e:
        return error_response(e)
    except Exception as e:
        return unexpected_error("Insert scan", e)
