from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from football_platform.core.config import settings

# SQLite needs the same connection shared across FastAPI's threadpool
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

# Create the engine with `pool_pre_ping=True` to prevent stale connections
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,   # tests connections before using them
    connect_args=connect_args,
)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()

# Dependency to get DB session
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def import_models():
    """Register every model on Base.metadata."""
    from football_platform.leagues.models.leagues_models import League
    from football_platform.seasons.models.seasons_model import Season
    from football_platform.teams.models.team_model import Team
    from football_platform.positions.models.position_model import Position
    from football_platform.players.models.player_model import Player, TeamRoster
    from football_platform.matches.models.match_model import Match, MatchTeam
    from football_platform.player_stats.models.player_stat_model import PlayerStat

# Function to initialize the database
def init_db(bind=None):
    import_models()

    # Use context manager to ensure connection is released
    with (bind or engine).begin() as conn:
        Base.metadata.create_all(bind=conn)
