from sqlalchemy import Boolean, Column, DateTime, Integer, JSON, Uuid, func
from regionpath.core.database import Base
from uuid import uuid4


class Game(Base):
    __tablename__ = "games"

    id = Column(Uuid, primary_key=True, default=uuid4)
    start_id = Column(Integer, nullable=False)
    end_id = Column(Integer, nullable=False)
    current_id = Column(Integer, nullable=False)
    visited = Column(JSON, nullable=False) # region ids: start, target, then guesses in order
    finished = Column(Boolean, nullable=False, default=False)
    moves = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
