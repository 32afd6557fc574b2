"""Error taxonomy for the upload pipeline and the processing step."""


class ResearchAssistantError(Exception):
    """Base class for errors raised by this application."""


class MissingInformationError(ResearchAssistantError):
    """An upload was submitted without a file or without a title."""


class PolicyViolation(ResearchAssistantError):
    """A row operation was attempted on behalf of a different owner."""


class RecordCreationError(ResearchAssistantError):
    """The transcript row could not be inserted."""


class UploadError(ResearchAssistantError):
    """The audio bytes could not be written to the object store."""


class ProcessingInvocationError(ResearchAssistantError):
    """The processing step could not be invoked, or reported failure."""


class NotFoundError(ResearchAssistantError):
    """A transcript id did not match any row."""


class CompletionEndpointError(ResearchAssistantError):
    """The chat-completion request failed or returned an unusable body."""
