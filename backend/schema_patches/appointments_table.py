"""
appointments table (snake_case)
"""
from .runner import SchemaPatch, Statement

PATCH = SchemaPatch(
    name="appointments_table",
    description="create appointments",
    statements=[
        Statement(
            label="table appointments",
            sql="""
            CREATE TABLE IF NOT EXISTS "appointments" (
              "id" serial PRIMARY KEY NOT NULL,
              "user_id" integer NOT NULL,
              "lead_id" integer NOT NULL,
              "title" varchar(255) NOT NULL,
              "description" text,
              "type" varchar(50) DEFAULT 'visit',
              "start_time" timestamp NOT NULL,
              "end_time" timestamp,
              "status" varchar(50) DEFAULT 'scheduled',
              "created_at" timestamp DEFAULT now() NOT NULL,
              "updated_at" timestamp DEFAULT now() NOT NULL
            )
            """,
        ),
        Statement(
            label="index appointment_user_idx",
            sql='CREATE INDEX IF NOT EXISTS "appointment_user_idx" ON "appointments" USING btree ("user_id")',
        ),
        Statement(
            label="index appointment_lead_idx",
            sql='CREATE INDEX IF NOT EXISTS "appointment_lead_idx" ON "appointments" USING btree ("lead_id")',
        ),
        Statement(
            label="index appointment_start_time_idx",
            sql='CREATE INDEX IF NOT EXISTS "appointment_start_time_idx" ON "appointments" USING btree ("start_time")',
        ),
    ],
)
