"""
Support ticket enums and tables (supportTickets, supportMessages), camelCase
"""
from .ddl import create_enum, create_index
from .runner import SchemaPatch, Statement

PATCH = SchemaPatch(
    name="support_tables",
    description="create supportTickets and supportMessages",
    statements=[
        create_enum("ticket_status", ["open", "pending", "resolved"]),
        create_enum("ticket_priority", ["low", "medium", "high"]),
        Statement(
            label="table supportTickets",
            sql="""
            CREATE TABLE IF NOT EXISTS "supportTickets" (
              "id" serial PRIMARY KEY,
              "userId" integer NOT NULL,
              "subject" varchar(255) NOT NULL,
              "status" ticket_status DEFAULT 'open' NOT NULL,
              "priority" ticket_priority DEFAULT 'medium' NOT NULL,
              "createdAt" timestamp DEFAULT now() NOT NULL,
              "updatedAt" timestamp DEFAULT now() NOT NULL,
              "resolvedAt" timestamp
            )
            """,
        ),
        create_index("ticket_user_idx", "supportTickets", "userId"),
        create_index("ticket_status_idx", "supportTickets", "status"),
        create_index("ticket_priority_idx", "supportTickets", "priority"),
        create_index("ticket_created_at_idx", "supportTickets", "createdAt"),
        Statement(
            label="table supportMessages",
            sql="""
            CREATE TABLE IF NOT EXISTS "supportMessages" (
              "id" serial PRIMARY KEY,
              "ticketId" integer NOT NULL,
              "userId" integer,
              "senderType" varchar(20) NOT NULL,
              "message" text NOT NULL,
              "createdAt" timestamp DEFAULT now() NOT NULL
            )
            """,
        ),
        create_index("message_ticket_idx", "supportMessages", "ticketId"),
        create_index("message_user_idx", "supportMessages", "userId"),
        create_index("message_created_at_idx", "supportMessages", "createdAt"),
    ],
)
