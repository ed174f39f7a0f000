from sqlalchemy import Column, Integer, String, Date, ForeignKey
from sqlalchemy.orm import relationship
from football_platform.core.database import Base

class Player(Base):
    __tablename__ = "players"

    player_id = Column(Integer, primary_key=True, index=True)
    player_name = Column(String, nullable=False)
    default_position_id = Column(Integer, ForeignKey("positions.position_id"))
    team_id = Column(Integer)  # teams.team_id, unconstrained
    date_of_birth = Column(Date)
    nationality = Column(String)
    height_cm = Column(Integer)
    foot = Column(String)

    position = relationship("Position", back_populates="players")
    team = relationship(
        "Team", back_populates="players",
        primaryjoin="Team.team_id == foreign(Player.team_id)",
    )
    rosters = relationship(
        "TeamRoster", back_populates="player",
        primaryjoin="Player.player_id == foreign(TeamRoster.player_id)",
    )
    stats = relationship(
        "PlayerStat", back_populates="player",
        primaryjoin="Player.player_id == foreign(PlayerStat.player_id)",
    )


class TeamRoster(Base):
    __tablename__ = "team_rosters"

    roster_id = Column(Integer, primary_key=True, index=True)
    # Rosters outlive the team, player or season they point at
    team_id = Column(Integer, nullable=False)
    player_id = Column(Integer, nullable=False)
    season_id = Column(Integer, nullable=False)
    join_date = Column(Date)
    contract_status = Column(String)

    player = relationship(
        "Player", back_populates="rosters",
        primaryjoin="Player.player_id == foreign(TeamRoster.player_id)",
    )
