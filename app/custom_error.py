from fastapi import HTTPException, status


class ServerError(HTTPException):
    def __init__(self, error_detail_message: str):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=error_detail_message)


class ValidationError(HTTPException):
    def __init__(self, error_detail_message: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=error_detail_message)


class WebhookError(HTTPException):
    def __init__(self, error_detail_message: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=error_detail_message)


# ---------------------------------------------------------------------------------------------------------------------
# webhook payload errors
# the caller-visible message is always generic, the validation detail only goes to the server logs


class WebhookPayloadError(HTTPException):
    def __init__(self, error_detail_message: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=error_detail_message)


class MalformedWebhookPayloadError(WebhookPayloadError):
    def __init__(self, provider: str):
        super().__init__(f"Malformed {provider} webhook payload")


class InvalidWebhookPayloadError(WebhookPayloadError):
    def __init__(self, provider: str):
        super().__init__(f"Error parsing {provider} webhook payload")


class UnhandledWebhookEventError(Exception):
    """Raised for an event kind we don't process. Callers acknowledge it (HTTP 200) so the provider stops retrying."""

    def __init__(self, event_type: str):
        self.event_type = event_type
        super().__init__(f"Unhandled webhook event type: {event_type}")
