from pydantic_settings import BaseSettings, SettingsConfigDict

from lease_analyzer.config.exceptions import ConfigurationError

MIB = 1024 * 1024


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    aws_region: str = "us-east-1"
    s3_bucket_name: str = ""
    storage_provider: str = "s3"

    ocr_provider: str = "textract"
    ocr_poll_interval_seconds: float = 3.0
    ocr_max_attempts: int = 100

    max_file_size_bytes: int = 50 * MIB
    fallback_max_size_bytes: int = 5 * MIB
    supported_extensions: list[str] = [
        "pdf", "txt", "doc", "docx", "png", "jpg", "jpeg", "gif", "bmp", "tiff",
    ]
    supported_mime_types: list[str] = [
        "application/pdf",
        "text/plain",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "image/png",
        "image/jpeg",
        "image/gif",
        "image/bmp",
        "image/tiff",
    ]

    analysis_provider: str = "bedrock"
    bedrock_model_id: str = "us.anthropic.claude-sonnet-4-20250514-v1:0"
    analysis_max_tokens: int = 2000
    analysis_temperature: float = 0.0

    openai_api_key: str = ""
    openai_model_name: str = ""
    openai_timeout_seconds: int = 60
    openai_base_url: str | None = None

    @property
    def ocr_timeout_seconds(self) -> float:
        return self.ocr_poll_interval_seconds * self.ocr_max_attempts

    def validate_required(self) -> None:
        """Check values that must hold before any client is built.

        Raises:
            ConfigurationError: on the first missing or invalid value.
        """
        if not self.aws_region.strip():
            raise ConfigurationError("aws_region", "Region is required")
        if self.storage_provider.lower() == "s3" and not self.s3_bucket_name.strip():
            raise ConfigurationError("s3_bucket_name", "S3 bucket name is required")
        if self.max_file_size_bytes <= 0:
            raise ConfigurationError("max_file_size_bytes", "Must be greater than 0")
        if self.fallback_max_size_bytes <= 0:
            raise ConfigurationError("fallback_max_size_bytes", "Must be greater than 0")
        if self.ocr_poll_interval_seconds <= 0:
            raise ConfigurationError("ocr_poll_interval_seconds", "Must be greater than 0")
        if self.ocr_max_attempts <= 0:
            raise ConfigurationError("ocr_max_attempts", "Must be greater than 0")
        if self.ocr_timeout_seconds <= self.ocr_poll_interval_seconds:
            raise ConfigurationError(
                "ocr_max_attempts", "Total OCR timeout must be greater than poll interval"
            )
        if self.analysis_max_tokens <= 0:
            raise ConfigurationError("analysis_max_tokens", "Must be greater than 0")
