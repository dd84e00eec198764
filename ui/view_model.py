"""
View model for the transcript assistant page.

Two independent pieces of view state:
- AssistantViewModel: idle -> loading -> success(content) | error(message)
- CopyFeedback: a transient "copied" flag that resets itself after a delay
"""

import asyncio
from enum import Enum
from typing import Awaitable, Callable, Optional

import logfire

from generation.client import GenerationClient, generate_from_transcript
from generation.models import GeneratedContent, GenerationFailed, GenerationOutcome, GenerationSucceeded

COPIED_RESET_SECONDS = 2.0
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."

ClipboardWriter = Callable[[str], Awaitable[None]]


class ViewStatus(str, Enum):
    """Generation state shown by the page."""
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class CopyFeedback:
    """
    Transient "copied" acknowledgment for a copy-to-clipboard action.

    Every copy writes the latest text and restarts the reset timer, so the
    flag goes back to False reset_after seconds after the last copy.
    """

    def __init__(self, clipboard: ClipboardWriter, reset_after: float = COPIED_RESET_SECONDS):
        self._clipboard = clipboard
        self.reset_after = reset_after
        self.copied = False
        self._reset_handle: Optional[asyncio.TimerHandle] = None

    async def copy(self, text: str) -> None:
        await self._clipboard(text)
        self.copied = True

        if self._reset_handle is not None:
            self._reset_handle.cancel()
        loop = asyncio.get_running_loop()
        self._reset_handle = loop.call_later(self.reset_after, self._reset)

    def clear(self) -> None:
        """Drop the flag immediately (e.g. when a new generation starts)."""
        if self._reset_handle is not None:
            self._reset_handle.cancel()
        self._reset()

    def _reset(self) -> None:
        self.copied = False
        self._reset_handle = None


class AssistantViewModel:
    """
    Page state for one user session.

    generate() is ignored while a request is in flight. Starting a new
    generation clears the previous result, error and copy acknowledgment.

    clipboard is optional: the server-rendered page copies in the browser,
    so without a writer copy_crm_notes() raises RuntimeError instead of
    pretending the text was copied.
    """

    def __init__(
        self,
        client: GenerationClient,
        clipboard: Optional[ClipboardWriter] = None,
        copy_reset_after: float = COPIED_RESET_SECONDS,
    ):
        self.client = client
        self.transcript = ""
        self.status = ViewStatus.IDLE
        self.content: Optional[GeneratedContent] = None
        self.error: Optional[str] = None
        self.crm_copy = CopyFeedback(clipboard or _no_clipboard, reset_after=copy_reset_after)

    @property
    def is_busy(self) -> bool:
        return self.status is ViewStatus.LOADING

    async def generate(self, transcript: str) -> Optional[GenerationOutcome]:
        """
        Run the generate action and move to success or error.

        Returns:
            The outcome, or None if a generation was already in flight
        """
        if self.is_busy:
            logfire.warning("Generate ignored while a request is in flight")
            return None

        self.transcript = transcript
        self.status = ViewStatus.LOADING
        self.content = None
        self.error = None
        self.crm_copy.clear()

        try:
            outcome = await generate_from_transcript(self.client, transcript)
        except Exception as e:
            # Provider failures are already mapped; anything else still ends in the error state
            logfire.error("Unexpected error during generation", error=str(e), error_type=type(e).__name__)
            outcome = GenerationFailed(message=str(e) or UNEXPECTED_ERROR_MESSAGE)

        if isinstance(outcome, GenerationSucceeded):
            self.status = ViewStatus.SUCCESS
            self.content = outcome.content
        else:
            self.status = ViewStatus.ERROR
            self.error = outcome.message

        return outcome

    async def copy_crm_notes(self) -> bool:
        """Copy the CRM notes if there are any. Returns True if something was copied."""
        if self.content is None or not self.content.crm_notes:
            return False
        await self.crm_copy.copy(self.content.crm_notes)
        return True

    def reset(self) -> None:
        """Back to an empty idle page."""
        self.transcript = ""
        self.status = ViewStatus.IDLE
        self.content = None
        self.error = None
        self.crm_copy.clear()


async def _no_clipboard(text: str) -> None:
    raise RuntimeError("No clipboard available on the server; copying happens in the browser")
