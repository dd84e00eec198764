"""
Presentation layer: view state for the transcript assistant page.
"""

from ui.view_model import COPIED_RESET_SECONDS, AssistantViewModel, CopyFeedback, ViewStatus

__all__ = ["COPIED_RESET_SECONDS", "AssistantViewModel", "CopyFeedback", "ViewStatus"]
