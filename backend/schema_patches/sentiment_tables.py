"""
Sentiment enums and tables (sentimentAnalyses, conversationSummaries, sentimentAlerts)
"""
from .ddl import create_enum, create_index
from .runner import SchemaPatch, Statement

PATCH = SchemaPatch(
    name="sentiment_tables",
    description="create sentiment enums and tables",
    statements=[
        create_enum("sentiment", ["positive", "negative", "neutral"]),
        create_enum("sentiment_urgency", ["low", "medium", "high"]),
        create_enum("sentiment_tone", ["friendly", "frustrated", "neutral", "excited"]),
        Statement(
            label="table sentimentAnalyses",
            sql="""
            CREATE TABLE IF NOT EXISTS "sentimentAnalyses" (
              "id" serial PRIMARY KEY,
              "conversationId" varchar(255) NOT NULL,
              "message" text NOT NULL,
              "sentiment" sentiment NOT NULL,
              "score" numeric(3,2) NOT NULL,
              "confidence" numeric(3,2) NOT NULL,
              "keywords" text NOT NULL,
              "urgency" sentiment_urgency NOT NULL,
              "emotions" text,
              "tone" sentiment_tone,
              "suggestedResponse" text,
              "createdAt" timestamp DEFAULT now() NOT NULL
            )
            """,
        ),
        Statement(
            label="table conversationSummaries",
            sql="""
            CREATE TABLE IF NOT EXISTS "conversationSummaries" (
              "id" serial PRIMARY KEY,
              "conversationId" varchar(255) NOT NULL UNIQUE,
              "totalMessages" integer DEFAULT 0,
              "positiveCount" integer DEFAULT 0,
              "negativeCount" integer DEFAULT 0,
              "neutralCount" integer DEFAULT 0,
              "averageScore" numeric(3,2) DEFAULT 0.50,
              "sentimentTrend" varchar(20),
              "overallSatisfaction" varchar(50),
              "updatedAt" timestamp DEFAULT now() NOT NULL
            )
            """,
        ),
        Statement(
            label="table sentimentAlerts",
            sql="""
            CREATE TABLE IF NOT EXISTS "sentimentAlerts" (
              "id" serial PRIMARY KEY,
              "conversationId" varchar(255) NOT NULL,
              "messageId" varchar(255) NOT NULL,
              "sentiment" sentiment NOT NULL,
              "urgency" sentiment_urgency NOT NULL,
              "alertSent" boolean DEFAULT false,
              "resolvedAt" timestamp,
              "createdAt" timestamp DEFAULT now() NOT NULL
            )
            """,
        ),
        create_index("sentiment_conversation_idx", "sentimentAnalyses", "conversationId"),
        create_index("alert_conversation_idx", "sentimentAlerts", "conversationId"),
    ],
)
