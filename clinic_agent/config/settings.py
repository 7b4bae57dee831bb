"""Configuration management for the clinic receptionist agent."""
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from clinic_agent.core.models import ClinicProfile


class Settings(BaseSettings):
    """Application settings with validation."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Clinic profile - static data quoted by the agent, never mutated at runtime
    clinic_name: str = "Aarogyam Care Clinic"
    doctor_name: str = "Dr. Kavya Sharma"
    doctor_specialization: str = "Skin, Hair aur Pain Management Specialist"
    clinic_services: str = (
        "skin rejuvenation, hair fall treatment, pain therapy aur preventive health check-up"
    )
    working_hours: str = "Somvaar se Shaniwaar, subah 9 baje se shaam 7 baje tak"
    consultation_fee: str = "INR 700 ka consultation fee"

    # Application
    app_env: str = Field(default="development", pattern=r"^(development|staging|production|testing|test)$")
    log_level: str = Field(default="INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    admin_api_key: str = ""  # Admin API key to protect debug endpoints
    port: int = Field(default=8000, ge=1, le=65535)

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------

    @field_validator(
        "clinic_name",
        "doctor_name",
        "doctor_specialization",
        "clinic_services",
        "working_hours",
        "consultation_fee",
    )
    @classmethod
    def validate_clinic_field(cls, v: str) -> str:
        """Clinic details are spoken to callers, so they must not be blank."""
        cleaned = " ".join(v.split())
        if not cleaned:
            raise ValueError("Clinic profile fields must not be blank")
        return cleaned

    @field_validator("app_env", mode="before")
    @classmethod
    def validate_app_env(cls, v: str) -> str:
        """Normalize app_env to lowercase."""
        return v.lower() if isinstance(v, str) else v

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize log_level to uppercase."""
        return v.upper() if isinstance(v, str) else v

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"

    def clinic_profile(self) -> ClinicProfile:
        """Build the read-only clinic profile used by the dialogue engine."""
        return ClinicProfile(
            name=self.clinic_name,
            doctor=self.doctor_name,
            specialization=self.doctor_specialization,
            services=self.clinic_services,
            working_hours=self.working_hours,
            consultation_fee=self.consultation_fee,
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
