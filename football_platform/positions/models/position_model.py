from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from football_platform.core.database import Base

class Position(Base):
    __tablename__ = "positions"

    position_id = Column(Integer, primary_key=True, index=True)
    position_name = Column(String, unique=True, nullable=False)
    position_category = Column(String)

    players = relationship("Player", back_populates="position")
