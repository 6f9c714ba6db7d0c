"""Configuration management using Pydantic settings."""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings


class EngineConfig(BaseSettings):
    """Configuration for engine status classification."""
    
    # Engine expectations
    chain_name: str = Field(default="bitcoin", description="Chain the engine must report")
    min_version: str = Field(default="0.7.0-beta", description="Lowest acceptable engine version")
    
    # Error classification
    # gRPC status code 12 is UNIMPLEMENTED
    unimplemented_code: int = Field(default=12, description="RPC code for an unimplemented service")
    wallet_exists_message: str = Field(
        default="wallet already exists",
        description="Substring reported by the seed RPC once a wallet exists"
    )
    
    # Polling Settings
    poll_interval: int = Field(default=5, description="Seconds between status checks")
    poll_max_attempts: int = Field(default=12, description="Status checks before giving up")
    
    # Logging Settings
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log format (json|text)")
    log_file: Optional[str] = Field(default=None, description="Log file path")
    log_max_size_mb: int = Field(default=100, description="Max log file size in MB")
    log_backup_count: int = Field(default=5, description="Number of log backups")
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"
    
    def error_classifier(self):
        """Build an error classifier from the configured code and message."""
        from engine_status.core.error_classifier import ErrorClassifier
        
        return ErrorClassifier(
            unimplemented_code=self.unimplemented_code,
            wallet_exists_message=self.wallet_exists_message,
        )
