class MarketplaceError(Exception):
    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        server_message: str | None = None,
        fallback_key: str = "request_failed",
    ):
        self.message = message
        self.status_code = status_code
        self.server_message = server_message
        self.fallback_key = fallback_key
        super().__init__(message)


class NetworkError(Exception):
    def __init__(self, service: str, detail: str | None = None):
        self.service = service
        self.detail = detail
        super().__init__(f"Could not reach {service}")


class FormValidationError(Exception):
    def __init__(self, message_key: str, field: str | None = None, **params):
        self.message_key = message_key
        self.field = field
        self.params = params
        super().__init__(message_key)


class SubmissionInProgressError(Exception):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Submission already in progress for {key}")


class ScreenNotAllowedError(Exception):
    def __init__(self, screen: str, role: str | None):
        self.screen = screen
        self.role = role
        super().__init__(f"Screen {screen} is not available for role {role}")
