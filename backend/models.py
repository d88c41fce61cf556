from sqlalchemy import Column, Integer, String, Text, DateTime, Float, JSON
from sqlalchemy.sql import func
from database import Base


class Interaction(Base):
    __tablename__ = "interactions"

    id = Column(Integer, primary_key=True, index=True)
    session_id = Column(String(64), nullable=False, index=True)
    user_name = Column(String(120), nullable=True)
    user_message = Column(Text, nullable=False)
    ai_response = Column(Text, nullable=False)
    detected_intent = Column(String(64), nullable=True, index=True)  # rule name | moderation | affirmation:<topic> | default | error
    detected_entities = Column(JSON, nullable=True)  # {tecnologias, empresas, temas}
    timestamp = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    processing_time_ms = Column(Float, nullable=True)
    user_sentiment = Column(Float, nullable=True)  # -1 .. 1
    user_agent = Column(String(255), nullable=True)
