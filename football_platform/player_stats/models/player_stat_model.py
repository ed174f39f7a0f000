from sqlalchemy import Column, Integer, Float, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from football_platform.core.database import Base

class PlayerStat(Base):
    __tablename__ = "player_stats"

    stat_id = Column(Integer, primary_key=True, index=True)
    match_id = Column(Integer, ForeignKey("matches.match_id"), nullable=False, index=True)
    player_id = Column(Integer, nullable=False)  # players.player_id, unconstrained

    # Attacking
    goals = Column(Integer)
    assists = Column(Integer)
    shots_on_target = Column(Integer)
    shots_off_target = Column(Integer)
    key_passes = Column(Integer)

    # Defending
    tackles_won = Column(Integer)
    tackles_attempted = Column(Integer)
    interceptions = Column(Integer)
    clearances = Column(Integer)

    # Discipline
    fouls_committed = Column(Integer)
    fouls_won = Column(Integer)
    yellow_cards = Column(Integer)
    red_cards = Column(Integer)

    # Possession
    pass_completion_rate = Column(Float)
    dribbles_successful = Column(Integer)
    dribbles_attempted = Column(Integer)

    rating = Column(Float)
    created_at = Column(DateTime, server_default=func.now())

    match = relationship("Match", back_populates="player_stats")
    player = relationship(
        "Player", back_populates="stats",
        primaryjoin="Player.player_id == foreign(PlayerStat.player_id)",
    )

    COUNTER_FIELDS = (
        "goals", "assists", "shots_on_target", "shots_off_target", "key_passes",
        "tackles_won", "tackles_attempted", "interceptions", "clearances",
        "fouls_committed", "fouls_won", "yellow_cards", "red_cards",
        "dribbles_successful", "dribbles_attempted",
    )
    DECIMAL_FIELDS = ("pass_completion_rate", "rating")
