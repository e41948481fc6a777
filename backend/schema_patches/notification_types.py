"""
'support_reply' notification type

The notifications.type column is either the notification_type enum or a
varchar guarded by the notifications_type_check constraint, depending on
how the database was created. One DO block handles both.
"""
from .ddl import quote_literal
from .runner import SchemaPatch, Statement

NOTIFICATION_TYPES = (
    "new_lead",
    "quota_warning",
    "quota_exceeded",
    "payment_failed",
    "subscription_updated",
    "lead_status_changed",
    "system_alert",
    "support_reply",
    "new_support_ticket",
)

NEW_TYPE = "support_reply"


def build_statement(new_type: str = NEW_TYPE, all_types=NOTIFICATION_TYPES) -> Statement:
    allowed = ", ".join(quote_literal(t) for t in all_types)
    sql = f"""
    DO $$
    BEGIN
      IF EXISTS (SELECT 1 FROM pg_type WHERE typname = 'notification_type') THEN
        ALTER TYPE "notification_type" ADD VALUE IF NOT EXISTS {quote_literal(new_type)};
      ELSE
        ALTER TABLE "notifications" DROP CONSTRAINT IF EXISTS "notifications_type_check";
        ALTER TABLE "notifications" ADD CONSTRAINT "notifications_type_check"
          CHECK (type IN ({allowed}));
      END IF;
    END $$
    """
    return Statement(label=f"notification type {new_type}", sql=sql)


PATCH = SchemaPatch(
    name="notification_type_support_reply",
    description="allow 'support_reply' notifications",
    statements=[build_statement()],
)
