# =============================================================================
# TESTS - Platform initialization
# =============================================================================

from quiz_state.config import Settings
from quiz_state.models.quiz import PlatformConfig, PlatformStats
from quiz_state.services.quiz import QuizService
from quiz_state.services.storage import StateStore


class TestInitializePlatform:
    """Tests for QuizService.initialize_platform."""

    def test_writes_defaults(self, service):
        assert service.initialize_platform() is True

        config = service.get_platform_config()

        assert config.id == 1
        assert config.fee_percentage == 5
        assert config.treasury_address == "0x0"
        assert config.min_fee_threshold == 10 ** 15
        assert config.max_fee_cap is None
        assert config.fees_enabled is False
        assert service.get_platform_stats() == PlatformStats()

    def test_idempotent(self, service):
        service.initialize_platform()
        first = service.get_platform_config()

        assert service.initialize_platform() is False
        assert service.get_platform_config() == first

    def test_never_overwrites_existing_config(self, database, service):
        custom = PlatformConfig(
            fee_percentage=12,
            treasury_address="0x7ea5",
            min_fee_threshold=7,
            max_fee_cap=10 ** 30,
            fees_enabled=True,
        )
        with database.session() as session:
            StateStore(session).put_platform_config(custom)

        assert service.initialize_platform() is False
        assert service.get_platform_config() == custom

    def test_defaults_come_from_settings(self, database):
        settings = Settings(
            DATABASE_URL="sqlite:///:memory:",
            DEFAULT_PLATFORM_FEE_PERCENTAGE=3,
            DEFAULT_MAX_FEE_CAP=500,
        )
        service = QuizService(database, settings)

        service.initialize_platform()
        config = service.get_platform_config()

        assert config.fee_percentage == 3
        assert config.max_fee_cap == 500

    def test_uninitialized_reads_are_none(self, service):
        assert service.get_platform_config() is None
        assert service.get_platform_stats() is None
