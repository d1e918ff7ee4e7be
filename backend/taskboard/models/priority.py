from sqlalchemy import Column, Integer, String
from taskboard.core.database import Base


class Priority(Base):
    """Lookup table of task priorities (e.g. "Alta", "Baixa")."""
    __tablename__ = "priorities"

    id = Column(Integer, primary_key=True, index=True)
    description = Column(String, nullable=False)
