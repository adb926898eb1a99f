from lease_analyzer.analysis.analyzer import ContractAnalyzer
from lease_analyzer.analysis.base import BaseContractAnalyzer
from lease_analyzer.analysis.bedrock_client_adapter import BedrockClientAdapter
from lease_analyzer.analysis.example_client_adapter import ExampleClientAdapter
from lease_analyzer.analysis.openai_client_adapter import OpenAIClientAdapter
from lease_analyzer.config.settings import Settings

SUPPORTED_PROVIDERS = ("bedrock", "openai", "example")


class AnalyzerFactory:
    """Creates the configured contract analyzer."""

    @classmethod
    def create(cls, settings: Settings) -> BaseContractAnalyzer:
        """Create a configured analyzer from application settings."""
        provider = settings.analysis_provider.lower()
        if provider == "example":
            return ContractAnalyzer(client=ExampleClientAdapter(), model="example")
        if provider == "bedrock":
            return ContractAnalyzer(
                client=BedrockClientAdapter(region=settings.aws_region),
                model=settings.bedrock_model_id,
                max_tokens=settings.analysis_max_tokens,
                temperature=settings.analysis_temperature,
            )
        if provider == "openai":
            return ContractAnalyzer(
                client=OpenAIClientAdapter(
                    api_key=settings.openai_api_key,
                    timeout_seconds=settings.openai_timeout_seconds,
                    base_url=(settings.openai_base_url or "").strip() or None,
                ),
                model=settings.openai_model_name,
                max_tokens=settings.analysis_max_tokens,
                temperature=settings.analysis_temperature,
            )
        raise ValueError(
            f"Unknown analysis provider '{provider}'. Choose from: {list(SUPPORTED_PROVIDERS)}"
        )
