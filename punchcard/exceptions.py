class ApiError(Exception):
    """Base for every error reported to clients as ``{"status": "error", ...}``."""

    kind = "unknownError"
    status_code = 500
    message = "An unexpected error occurred"

    def __init__(self, message=None):
        super().__init__(message or self.message)

    def to_dict(self):
        return {"status": "error", "error": self.kind, "message": str(self)}


class MissingFieldsError(ApiError):
    kind = "insufficientData"
    status_code = 400
    message = "Missing required fields"

    def __init__(self, fields, message=None):
        super().__init__(message)
        self.fields = fields

    def to_dict(self):
        body = super().to_dict()
        body["missingFields"] = self.fields
        return body


class DuplicateScanError(ApiError):
    kind = "duplicateScan"
    status_code = 409
    message = "This user has already been scanned into this event"


class NoUserError(ApiError):
    kind = "noUser"
    status_code = 404
    message = "No user exists with that netId"


class UnknownError(ApiError):
    pass
