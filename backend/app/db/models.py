from sqlalchemy import Column, Integer, String, Text
from .session import Base


class Event(Base):
    __tablename__ = "events"
    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    date = Column(String(10), nullable=False, index=True)  # YYYY-MM-DD
    time = Column(String(5), nullable=False)  # HH:MM
    category = Column(String, nullable=False, default="personal", index=True)
    recurrence = Column(String, nullable=False, default="none", index=True)
    recurrence_config = Column(Text, nullable=True)  # JSON text, custom recurrence only
    # source row of a generated instance; no foreign key, deleting the source keeps instances
    original_event_id = Column(Integer, nullable=True)
