"""
AI Copilot tables (ai_copilot_conversations, ai_copilot_messages)

Both statements come from fixed SQL files. The title migration has no
IF NOT EXISTS guard, so an "already exists" error there counts as applied.
"""
from pathlib import Path

from .runner import SchemaPatch, Statement

SQL_DIR = Path(__file__).resolve().parent / "sql"

PATCH = SchemaPatch(
    name="copilot_tables",
    description="create ai_copilot_conversations and ai_copilot_messages",
    statements=[
        Statement(
            label="tables ai_copilot_conversations, ai_copilot_messages",
            sql_file=SQL_DIR / "0012_ai_copilot_conversations.sql",
        ),
        Statement(
            label="ai_copilot_conversations.title",
            sql_file=SQL_DIR / "0014_copilot_conversation_title.sql",
            tolerate_existing=True,
        ),
    ],
)
