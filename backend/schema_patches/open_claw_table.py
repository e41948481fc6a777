"""
open_claw_automations table, plus execution_mode on tables created before it existed
"""
from .ddl import create_index
from .runner import SchemaPatch, Statement

PATCH = SchemaPatch(
    name="open_claw_table",
    description="ensure open_claw_automations",
    statements=[
        Statement(
            label="table open_claw_automations",
            sql="""
            CREATE TABLE IF NOT EXISTS "open_claw_automations" (
              "id" serial PRIMARY KEY NOT NULL,
              "user_id" integer NOT NULL,
              "name" varchar(255) NOT NULL,
              "description" text,
              "trigger_event" varchar(100) NOT NULL,
              "min_score" numeric(3, 2) DEFAULT '0.00',
              "action_type" varchar(100) NOT NULL,
              "action_config" text,
              "execution_mode" varchar(50) DEFAULT 'manual_approval',
              "is_active" boolean DEFAULT true,
              "created_at" timestamp DEFAULT now() NOT NULL,
              "updated_at" timestamp DEFAULT now() NOT NULL
            )
            """,
        ),
        create_index("openclaw_automation_user_idx", "open_claw_automations", "user_id"),
        Statement(
            label="open_claw_automations.execution_mode",
            sql=(
                'ALTER TABLE "open_claw_automations" ADD COLUMN IF NOT EXISTS '
                "\"execution_mode\" varchar(50) DEFAULT 'manual_approval'"
            ),
        ),
    ],
)
