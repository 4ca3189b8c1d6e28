"""
Configuration Management Module
Loads and manages application configuration from config.yaml
"""

from decimal import Decimal
from pathlib import Path
from typing import List
import yaml
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class CompanyConfig(BaseModel):
    """Company profile printed on invoices and exports"""
    name: str = "NAC Computers"
    address: str = ""
    gst_number: str = ""
    phone: str = ""
    email: str = ""


class DatabaseConfig(BaseModel):
    """Database configuration"""
    path: str = "./books.db"
    seed_sample_data: bool = True


class ExportConfig(BaseModel):
    """Tally export configuration"""
    file_prefix: str = "NAC_TallyExport"


class GstConfig(BaseModel):
    """Flat GST rate in percent, split equally into CGST and SGST"""
    rate: Decimal = Decimal("18")


class ApiConfig(BaseModel):
    """API configuration"""
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: List[str] = ["http://localhost:3000"]


class LoggingConfig(BaseModel):
    """Logging configuration"""
    level: str = "INFO"
    file: str = "./logs/app.log"
    max_size: int = 10
    backup_count: int = 5
    console: bool = True
    colorize: bool = True


class AppConfig(BaseModel):
    """Main application configuration"""
    company: CompanyConfig = CompanyConfig()
    database: DatabaseConfig = DatabaseConfig()
    export: ExportConfig = ExportConfig()
    gst: GstConfig = GstConfig()
    api: ApiConfig = ApiConfig()
    logging: LoggingConfig = LoggingConfig()


class Settings(BaseSettings):
    """Environment overrides (BOOKKEEPER_CONFIG_FILE=/path/to/config.yaml)"""
    model_config = SettingsConfigDict(env_prefix="BOOKKEEPER_")

    config_file: str = "config.yaml"


def load_config(config_path: str = None) -> AppConfig:
    """Load configuration from YAML file"""
    config_file = Path(config_path or Settings().config_file)

    if config_file.exists():
        with open(config_file, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}
            return AppConfig(**config_data)

    return AppConfig()


def save_config(config: AppConfig, config_path: str = None) -> None:
    """Save configuration to YAML file"""
    config_file = Path(config_path or Settings().config_file)

    with open(config_file, "w", encoding="utf-8") as f:
        yaml.safe_dump(config.model_dump(mode="json"), f, default_flow_style=False, allow_unicode=True)


# Global configuration instance
config = load_config()
