"""
Lead model - prospects captured from conversations
"""
from sqlalchemy import Column, Integer, String, Text, Numeric, DateTime, Enum, Index, func
from backend.database import Base


class Lead(Base):
    __tablename__ = "leads"

    id = Column(Integer, primary_key=True)
    user_id = Column("userId", Integer, nullable=False)
    organization_id = Column("organizationId", Integer)

    # Contact
    name = Column(String(255))
    phone = Column(String(20))
    email = Column(String(320))

    # Qualification
    objective = Column(Enum("buy", "rent", "sell", "unknown", name="objective"))
    property_type = Column("propertyType", String(255))
    neighborhood = Column(String(255))
    budget = Column(String(255))
    urgency = Column(Enum("cold", "warm", "hot", name="urgency"), server_default="cold")
    score = Column(Numeric(3, 2), server_default="0.00")
    status = Column(
        Enum("new", "contacted", "qualified", "lost", "converted", name="lead_status"),
        server_default="new",
    )
    source = Column(String(255), server_default="whatsapp_extension")
    qualification_checklist = Column("qualificationChecklist", Text)  # JSON text

    # AI output
    summary = Column(Text)
    suggested_response = Column("suggestedResponse", Text)
    raw_conversation = Column("rawConversation", Text)

    # Timestamps
    created_at = Column("createdAt", DateTime, server_default=func.now(), nullable=False)
    updated_at = Column("updatedAt", DateTime, server_default=func.now(), nullable=False)

    __table_args__ = (
        Index("lead_user_idx", "userId"),
        Index("lead_organization_idx", "organizationId"),
        Index("lead_created_at_idx", "createdAt"),
        Index("lead_status_idx", "status"),
    )

    def __repr__(self):
        return f"<Lead {self.id} ({self.status})>"
