from typing import Any


class IdeaServiceError(Exception):
    """Base for failures surfaced to the HTTP caller with a distinct status."""

    code = "internal_error"
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def as_payload(self) -> dict[str, Any]:
        return {"error": {"code": self.code, "message": self.message}}


class MethodNotAllowedError(IdeaServiceError):
    code = "method_not_allowed"
    status_code = 405


class ConfigurationError(IdeaServiceError):
    """A required secret is missing; needs operator action, not a resubmit."""

    code = "configuration_error"
    status_code = 500


class InputError(IdeaServiceError):
    code = "input_error"
    status_code = 400


class UpstreamError(IdeaServiceError):
    """The text-generation call failed or returned a non-success status."""

    code = "upstream_error"
    status_code = 502

    def __init__(self, message: str, upstream_status: int | None = None) -> None:
        super().__init__(message)
        self.upstream_status = upstream_status

    def as_payload(self) -> dict[str, Any]:
        payload = super().as_payload()
        payload["error"]["upstream_status"] = self.upstream_status
        return payload
