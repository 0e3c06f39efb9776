"""Configuration management using Pydantic Settings"""

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from bankintegration.domain.exceptions import InvalidConfigurationError, MissingConfigurationError
from bankintegration.domain.models import ErpCredentials


class BankAccount(BaseModel):
    """Account entry from the BANK_ACCOUNTS list (original secret-store keys accepted)"""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field("", alias="Navn")
    institution_code: str = Field("", alias="InstKode")
    bban: str = Field("", alias="BBAN")
    integration_key: str = Field("", alias="IntegrationsKey")


_accounts_adapter = TypeAdapter(List[BankAccount])


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Identity issued by bankintegration.dk
    erp_id: Optional[str] = None
    erp_name: Optional[str] = None

    # External Services
    report_api_url: str = "https://api.bankintegration.dk/report/account"

    # Service
    service_name: str = "bankintegration"
    log_level: str = "INFO"

    # HTTP Client
    http_timeout_seconds: float = 30.0

    # Output
    export_dir: Path = Path("exports")
    metrics_textfile: Optional[Path] = None

    # Known accounts, JSON list in BANK_ACCOUNTS; parsed on demand by accounts()
    bank_accounts: Optional[str] = None

    def credentials(self) -> ErpCredentials:
        """
        Build the signing identity.

        Raises:
            MissingConfigurationError: If erp_id or erp_name is unset
        """
        missing = [name for name in ("erp_id", "erp_name") if not getattr(self, name)]
        if missing:
            raise MissingConfigurationError(f"Missing configuration: {', '.join(missing)}")
        return ErpCredentials(erp_id=self.erp_id, erp_name=self.erp_name)

    def accounts(self) -> List[BankAccount]:
        """
        Parse the BANK_ACCOUNTS directory.

        Raises:
            InvalidConfigurationError: If BANK_ACCOUNTS is not a JSON list of accounts
        """
        if not self.bank_accounts:
            return []
        try:
            return _accounts_adapter.validate_json(self.bank_accounts)
        except ValidationError as e:
            raise InvalidConfigurationError(f"Invalid BANK_ACCOUNTS: {e.error_count()} error(s)") from e


settings = Settings()
