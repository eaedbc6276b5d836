# sponsor_service/services/errors.py
"""
Business-rule failures of sponsor mutations.

Components raise these where they detect the problem. SponsorService
catches them at its boundary, rolls the transaction back and turns the
message into a ``{"status": {"code": 0, "message": ...}}`` response.
"""


class SponsorError(Exception):
    """Base class; ``message`` is what the caller sees."""

    message = "The sponsor request could not be processed"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


# --- Authorization ---

class NotAuthorizedError(SponsorError):
    message = "Not authorized to change the event details"


# --- Validation ---

class ValidationFailure(SponsorError):
    pass


class EventNotFoundError(ValidationFailure):
    message = "Event not found"


class NoEditionError(ValidationFailure):
    message = "Could not determine event edition"


class InvalidEditionError(ValidationFailure):
    message = "Edition does not belong to the specified event."


class InvalidCompanyError(ValidationFailure):
    message = "Invalid companyId"


class MissingSponsorIdentityError(ValidationFailure):
    message = "companyId or name is required"


class SponsorNotFoundError(ValidationFailure):
    message = "Sponsor not found"


class SponsorIdRequiredError(ValidationFailure):
    message = "sponsorId is required for deletion"


class MissingCompanyContextError(ValidationFailure):
    message = "companyId is required to upload a logo"


class InvalidAttachmentError(ValidationFailure):
    message = "Invalid logo attachment ID"


# --- Conflict ---

class DuplicateSponsorError(SponsorError):
    message = "Duplicate sponsor not allowed"


# --- Dependency ---

class StorageUploadError(SponsorError):
    def __init__(self, detail: str | None):
        self.detail = detail
        super().__init__(f"Error saving image: S3 upload failed: {detail}")
