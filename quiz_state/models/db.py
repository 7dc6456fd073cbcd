"""SQLAlchemy database models for quiz state"""
from sqlalchemy import Column, Integer, String, Text, Boolean, BigInteger, JSON
from sqlalchemy.orm import declarative_base
from sqlalchemy.types import TypeDecorator

Base = declarative_base()

# Key of the singleton counter, config and stats rows
SINGLETON_ID = 1

class Uint256(TypeDecorator):
    """
    Unsigned 256-bit integer stored as its decimal string.

    Token amounts routinely exceed the 64-bit range of native integer columns.
    """
    impl = String(78)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        value = int(value)
        if value < 0 or value >= 2 ** 256:
            raise ValueError(f"Value out of uint256 range: {value}")
        return str(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return int(value)

class QuizCounterRecord(Base):
    """Singleton holding the last allocated quiz id"""
    __tablename__ = 'quiz_counter'

    id = Column(Integer, primary_key=True)
    current_val = Column(BigInteger, nullable=False, default=0)

class QuizRecord(Base):
    """
    A created quiz with its embedded details and reward settings.
    Questions are stored verbatim as JSON.
    """
    __tablename__ = 'quizzes'

    id = Column(BigInteger, primary_key=True, autoincrement=False)
    quiz_title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    category = Column(Text, nullable=False)
    visibility = Column(Boolean, nullable=False)
    questions = Column(JSON, nullable=False)
    default_duration = Column(Integer, nullable=False)
    default_max_points = Column(Integer, nullable=False)
    custom_timing = Column(Boolean, nullable=False)
    creator = Column(String, nullable=False, index=True)

    has_rewards = Column(Boolean, nullable=False)
    token_address = Column(String, nullable=False)
    reward_amount = Column(Uint256, nullable=False)
    distribution_type = Column(String(20), nullable=False)
    number_of_winners = Column(Integer, nullable=False)
    prize_percentage = Column(JSON, nullable=False)
    min_players = Column(BigInteger, nullable=False)

    created_at = Column(BigInteger, nullable=False)
    game_sessions_created = Column(BigInteger, nullable=False, default=0)
    total_rewards_distributed = Column(Uint256, nullable=False, default=0)
    platform_fees_generated = Column(Uint256, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=False)

class CreatorStatsRecord(Base):
    """Aggregate counters per creator, keyed by actor identifier"""
    __tablename__ = 'creator_stats'

    creator = Column(String, primary_key=True)
    total_quizzes_created = Column(BigInteger, nullable=False, default=0)
    total_games_hosted = Column(BigInteger, nullable=False, default=0)
    total_rewards_distributed = Column(Uint256, nullable=False, default=0)
    total_platform_fees_paid = Column(Uint256, nullable=False, default=0)
    average_game_size = Column(BigInteger, nullable=False, default=0)
    last_activity = Column(BigInteger, nullable=False)

class PlatformConfigRecord(Base):
    """Singleton platform fee configuration"""
    __tablename__ = 'platform_config'

    id = Column(Integer, primary_key=True)
    fee_percentage = Column(Integer, nullable=False)
    treasury_address = Column(String, nullable=False)
    min_fee_threshold = Column(Uint256, nullable=False)
    max_fee_cap = Column(Uint256, nullable=True)
    fees_enabled = Column(Boolean, nullable=False)

class PlatformStatsRecord(Base):
    """Singleton platform wide counters"""
    __tablename__ = 'platform_stats'

    id = Column(Integer, primary_key=True)
    total_quizzes_created = Column(BigInteger, nullable=False, default=0)
    total_games_hosted = Column(BigInteger, nullable=False, default=0)
    total_rewards_distributed = Column(Uint256, nullable=False, default=0)
    total_platform_fees_collected = Column(Uint256, nullable=False, default=0)

class QuizCreatedRecord(Base):
    """Append-only log of QuizCreated events"""
    __tablename__ = 'quiz_created_events'

    sequence = Column(Integer, primary_key=True, autoincrement=True)
    quiz_id = Column(BigInteger, nullable=False)
    title = Column(Text, nullable=False)
    creator = Column(String, nullable=False, index=True)
    timestamp = Column(BigInteger, nullable=False)
