"""
AI Copilot models - conversations and their messages
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, Index, func
from backend.database import Base


class AiCopilotConversation(Base):
    __tablename__ = "ai_copilot_conversations"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, nullable=False)
    title = Column(String(120))
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), nullable=False)

    __table_args__ = (
        Index("ai_copilot_conv_user_updated_idx", "user_id", "updated_at"),
    )

    def __repr__(self):
        return f"<AiCopilotConversation {self.id} - {self.title}>"


class AiCopilotMessage(Base):
    __tablename__ = "ai_copilot_messages"

    id = Column(Integer, primary_key=True)
    conversation_id = Column(Integer, nullable=False)
    role = Column(String(20), nullable=False)  # user, assistant
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    __table_args__ = (
        Index("ai_copilot_msg_conv_idx", "conversation_id"),
        Index("ai_copilot_msg_created_idx", "created_at"),
    )
