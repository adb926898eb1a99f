import pytest

from lease_analyzer.analysis.analyzer import ContractAnalyzer
from lease_analyzer.analysis.example_client_adapter import ExampleClientAdapter
from lease_analyzer.extraction.extractor import TextExtractor
from lease_analyzer.extraction.ocr_job import OcrJobPoller
from lease_analyzer.processor.deleter import ContractDeleter
from lease_analyzer.processor.processor import ContractProcessor, ServiceContainer
from lease_analyzer.processor.steps import (
    AnalyzeStep,
    ExtractTextStep,
    QualityCheckStep,
    ScoreTextQualityStep,
)
from lease_analyzer.storage.memory_adapter import InMemoryFileStorage

from fakes import BUCKET, FakeOcrClient


@pytest.fixture()
def storage() -> InMemoryFileStorage:
    return InMemoryFileStorage()


@pytest.fixture()
def ocr_client() -> FakeOcrClient:
    return FakeOcrClient()


@pytest.fixture()
def services(storage: InMemoryFileStorage, ocr_client: FakeOcrClient) -> ServiceContainer:
    """Full pipeline wired with in-process storage, scripted OCR and the example model."""
    poller = OcrJobPoller(
        ocr_client, poll_interval_seconds=0.01, max_attempts=10, sleep=lambda _: None
    )
    extractor = TextExtractor(
        storage=storage,
        ocr_client=ocr_client,
        poller=poller,
        bucket=BUCKET,
        fallback_max_size=5 * 1024 * 1024,
    )
    analyzer = ContractAnalyzer(client=ExampleClientAdapter(), model="example")
    processor = ContractProcessor(
        [
            ExtractTextStep(extractor),
            ScoreTextQualityStep(),
            AnalyzeStep(analyzer),
            QualityCheckStep(),
        ]
    )
    return ServiceContainer(
        processor=processor,
        deleter=ContractDeleter(storage=storage, bucket=BUCKET),
    )
