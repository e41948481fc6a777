"""
Database models
"""
from .user import User
from .lead import Lead
from .copilot import AiCopilotConversation, AiCopilotMessage

__all__ = ["User", "Lead", "AiCopilotConversation", "AiCopilotMessage"]
