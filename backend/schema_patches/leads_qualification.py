"""
qualificationChecklist column on the leads table
"""
from .runner import SchemaPatch, Statement

PATCH = SchemaPatch(
    name="leads_qualification",
    description="add qualificationChecklist to leads",
    statements=[
        Statement(
            label="leads.qualificationChecklist",
            sql='ALTER TABLE "leads" ADD COLUMN IF NOT EXISTS "qualificationChecklist" text',
        ),
    ],
)
