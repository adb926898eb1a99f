from lease_analyzer.config.settings import Settings
from lease_analyzer.ocr.base import BaseOcrClient
from lease_analyzer.ocr.textract_adapter import TextractClientAdapter


class OcrClientFactory:
    """Creates the configured OCR client."""

    ADAPTERS: dict[str, type[TextractClientAdapter]] = {
        "textract": TextractClientAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseOcrClient:
        provider = settings.ocr_provider.lower()
        adapter_cls = cls.ADAPTERS.get(provider)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown OCR provider '{provider}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls(region=settings.aws_region)
