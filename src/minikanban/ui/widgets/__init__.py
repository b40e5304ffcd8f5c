"""Widget components."""

from ..screens.help import HelpScreen
from .column import EmptyColumnMessage, KanbanColumn
from .dialogs import AlertModal, ConfirmModal, MessageDialog, PromptModal
from .task_card import TaskCard
from .task_preview_modal import TaskPreviewModal

__all__ = [
    "AlertModal",
    "ConfirmModal",
    "EmptyColumnMessage",
    "HelpScreen",
    "KanbanColumn",
    "MessageDialog",
    "PromptModal",
    "TaskCard",
    "TaskPreviewModal",
]
