"""Tests for AnalyzerFactory."""

from unittest.mock import patch

import pytest

from lease_analyzer.analysis.analyzer import ContractAnalyzer
from lease_analyzer.analysis.base import BaseContractAnalyzer
from lease_analyzer.analysis.factory import AnalyzerFactory
from lease_analyzer.config.settings import Settings


class TestAnalyzerFactory:
    def test_creates_example_analyzer(self) -> None:
        settings = Settings(analysis_provider="example")
        analyzer = AnalyzerFactory.create(settings)
        assert isinstance(analyzer, BaseContractAnalyzer)
        assert isinstance(analyzer, ContractAnalyzer)
        result = analyzer.analyze("any text", "lease.txt")
        assert result.lessees == ["Example Energy Corporation"]

    def test_uses_bedrock_settings(self) -> None:
        settings = Settings(
            analysis_provider="bedrock",
            aws_region="us-west-2",
            bedrock_model_id="model-x",
        )
        with patch("lease_analyzer.analysis.factory.BedrockClientAdapter") as mock_adapter:
            analyzer = AnalyzerFactory.create(settings)
        mock_adapter.assert_called_once_with(region="us-west-2")
        assert isinstance(analyzer, ContractAnalyzer)

    def test_provider_name_is_case_insensitive(self) -> None:
        settings = Settings(analysis_provider="Bedrock")
        with patch("lease_analyzer.analysis.factory.BedrockClientAdapter"):
            analyzer = AnalyzerFactory.create(settings)
        assert isinstance(analyzer, ContractAnalyzer)

    def test_uses_openai_settings(self) -> None:
        settings = Settings(
            analysis_provider="openai",
            openai_api_key="openai-key",
            openai_model_name="gpt-4",
            openai_timeout_seconds=42,
        )
        with patch("lease_analyzer.analysis.factory.OpenAIClientAdapter") as mock_adapter:
            AnalyzerFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="openai-key",
            timeout_seconds=42,
            base_url=None,
        )

    def test_uses_custom_openai_base_url(self) -> None:
        settings = Settings(
            analysis_provider="openai",
            openai_api_key="k",
            openai_model_name="m",
            openai_base_url=" https://example.com/v1 ",
        )
        with patch("lease_analyzer.analysis.factory.OpenAIClientAdapter") as mock_adapter:
            AnalyzerFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="k",
            timeout_seconds=60,
            base_url="https://example.com/v1",
        )

    def test_unknown_provider_raises_value_error(self) -> None:
        settings = Settings(analysis_provider="unknown")
        with pytest.raises(ValueError, match="Unknown analysis provider"):
            AnalyzerFactory.create(settings)
