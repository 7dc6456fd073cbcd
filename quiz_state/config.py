"""Application configuration and environment settings"""
from typing import Optional
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class PlatformDefaults(BaseModel):
    """Values written by the one-time platform initialization"""
    fee_percentage: int = Field(..., ge=0, le=100, description="Platform fee percentage")
    treasury_address: str = Field(..., description="Treasury actor identifier")
    min_fee_threshold: int = Field(..., ge=0, description="Minimum amount before fees apply")
    max_fee_cap: Optional[int] = Field(None, ge=0, description="Fee cap, None means uncapped")
    fees_enabled: bool = Field(False, description="Whether fees are charged")

class Settings(BaseSettings):
    """Application settings loaded from environment variables"""
    DATABASE_URL: str = Field("sqlite:///quiz_state.db", description="SQLAlchemy database URL")

    # Quiz limits
    MIN_QUESTIONS: int = Field(1, description="Fewest questions a quiz may carry")
    MAX_QUESTIONS: int = Field(50, description="Most questions a quiz may carry")

    # Platform defaults, applied once by initialize_platform_config
    DEFAULT_PLATFORM_FEE_PERCENTAGE: int = Field(5, description="Initial platform fee percentage")
    DEFAULT_TREASURY_ADDRESS: str = Field("0x0", description="Zero address pending admin assignment")
    DEFAULT_MIN_FEE_THRESHOLD: int = Field(10 ** 15, description="Initial minimum fee threshold")
    DEFAULT_MAX_FEE_CAP: Optional[int] = Field(None, description="Initial fee cap")
    DEFAULT_FEES_ENABLED: bool = Field(False, description="Whether fees start enabled")

    LOG_LEVEL: str = Field("INFO", description="Root log level for the CLI")
    OUTPUT_DIR: Optional[str] = Field(None, description="Directory for CLI output files")

    @property
    def platform_defaults(self) -> PlatformDefaults:
        """Get platform initialization values as a separate model"""
        return PlatformDefaults(
            fee_percentage=self.DEFAULT_PLATFORM_FEE_PERCENTAGE,
            treasury_address=self.DEFAULT_TREASURY_ADDRESS,
            min_fee_threshold=self.DEFAULT_MIN_FEE_THRESHOLD,
            max_fee_cap=self.DEFAULT_MAX_FEE_CAP,
            fees_enabled=self.DEFAULT_FEES_ENABLED
        )

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True
    )

settings = Settings()
