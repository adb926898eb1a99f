import math
import uuid
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime, timezone

from lease_analyzer.analysis.factory import AnalyzerFactory
from lease_analyzer.analysis.models import AnalysisFailed, to_analysis_result
from lease_analyzer.config.settings import Settings
from lease_analyzer.extraction.exceptions import ExtractionError
from lease_analyzer.extraction.extractor import TextExtractor
from lease_analyzer.extraction.ocr_job import OcrJobPoller
from lease_analyzer.logging.logger import Log
from lease_analyzer.ocr.factory import OcrClientFactory
from lease_analyzer.processor.deleter import ContractDeleter
from lease_analyzer.processor.exceptions import AggregateValidationError
from lease_analyzer.processor.models import (
    Contract,
    DetailedProcessingResult,
    ProcessingSummary,
    UploadedFile,
)
from lease_analyzer.processor.pipeline import FileContext, PipelineStep
from lease_analyzer.processor.steps import (
    AnalyzeStep,
    ExtractTextStep,
    QualityCheckStep,
    ScoreTextQualityStep,
)
from lease_analyzer.rules.scoring import calculate_quality_score, is_high_risk
from lease_analyzer.rules.validation import (
    DEFAULT_MAX_FILE_SIZE,
    FILE_TYPE_LABELS,
    SUPPORTED_MIME_TYPES,
    is_analysis_successful,
    is_supported_file_type,
    processing_priority,
    validate_file_metadata,
)
from lease_analyzer.storage.factory import FileStorageFactory


def generate_contract_id() -> str:
    """Time plus random suffix; unique in practice, not guaranteed."""
    millis = int(datetime.now(timezone.utc).timestamp() * 1000)
    return f"contract-{millis}-{uuid.uuid4().hex[:9]}"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ContractProcessor:
    """Orchestrates validation, extraction and analysis for a batch of files.

    Pipeline per file: extract -> score text -> analyze -> quality check.
    One file's failure never affects another file's contract.
    """

    def __init__(
        self,
        steps: list[PipelineStep],
        *,
        max_file_size: int = DEFAULT_MAX_FILE_SIZE,
        supported_extensions: frozenset[str] | None = None,
        supported_mime_types: frozenset[str] | None = None,
        id_factory: Callable[[], str] = generate_contract_id,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._steps = steps
        self._max_file_size = max_file_size
        self._supported_extensions = (
            supported_extensions
            if supported_extensions is not None
            else frozenset(FILE_TYPE_LABELS)
        )
        self._supported_mime_types = (
            supported_mime_types if supported_mime_types is not None else SUPPORTED_MIME_TYPES
        )
        self._id_factory = id_factory
        self._clock = clock

    def process(self, files: Sequence[UploadedFile]) -> list[Contract]:
        """Process every file and return one contract per file, in input order.

        Raises:
            AggregateValidationError: if any file fails validation. No file
                is extracted or analyzed in that case.
        """
        Log.info(f"Starting to process {len(files)} files")
        self._validate(files)
        if not files:
            return []

        # Priority only orders submission; completion order is up to the pool.
        order = sorted(
            range(len(files)),
            key=lambda i: processing_priority(files[i].name, files[i].size),
            reverse=True,
        )
        results: list[Contract | None] = [None] * len(files)
        with ThreadPoolExecutor(max_workers=len(files)) as executor:
            futures = {
                executor.submit(self._process_file, files[i], position, len(files)): i
                for position, i in enumerate(order, start=1)
            }
            for future, index in futures.items():
                results[index] = future.result()

        Log.info(f"Successfully processed {len(files)} files")
        return [contract for contract in results if contract is not None]

    def process_detailed(self, files: Sequence[UploadedFile]) -> DetailedProcessingResult:
        """Like process, plus a batch summary. Never raises on validation failure."""
        try:
            contracts = self.process(files)
        except AggregateValidationError as exc:
            return DetailedProcessingResult(
                success=False,
                contracts=[],
                errors=[str(exc)],
                summary=ProcessingSummary(
                    total_files=len(files),
                    successfully_processed=0,
                    failed=len(files),
                    average_quality_score=0,
                    high_risk_contracts=0,
                ),
            )
        return DetailedProcessingResult(
            success=True,
            contracts=contracts,
            errors=[],
            summary=summarize(contracts),
        )

    def _validate(self, files: Sequence[UploadedFile]) -> None:
        errors: list[str] = []
        for file in files:
            label = file.name or "<unnamed>"
            metadata = validate_file_metadata(file.name, file.size, self._max_file_size)
            errors.extend(f"{label}: {error}" for error in metadata.errors)
            support = is_supported_file_type(
                file.name,
                file.mime_type,
                self._supported_extensions,
                self._supported_mime_types,
            )
            if not support.is_supported:
                errors.append(f"{label}: Unsupported file type")
        if errors:
            Log.error(f"File validation failed: {errors}")
            raise AggregateValidationError(errors)

    def _process_file(self, file: UploadedFile, position: int, total: int) -> Contract:
        context = FileContext(
            file=file,
            contract_id=self._id_factory(),
            position=position,
            total=total,
        )
        try:
            for step in self._steps:
                context = step.run(context)
        except ExtractionError as exc:
            Log.error(f"Error processing file {file.name}: {exc}")
            return self._error_contract(context, str(exc), exc.storage_key)
        except Exception as exc:
            Log.error(f"Unexpected error processing file {file.name}: {exc}")
            storage_key = context.extraction.storage_key if context.extraction else None
            return self._error_contract(context, str(exc) or type(exc).__name__, storage_key)

        if context.extraction is None or context.analysis_outcome is None:
            return self._error_contract(context, "Pipeline did not produce an analysis", None)
        Log.info(f"Successfully processed {file.name}")
        return Contract(
            id=context.contract_id,
            file_name=file.name,
            upload_date=self._clock(),
            extracted_text=context.extraction.text,
            analysis=to_analysis_result(context.analysis_outcome),
            storage_key=context.extraction.storage_key,
        )

    def _error_contract(
        self,
        context: FileContext,
        message: str,
        storage_key: str | None,
    ) -> Contract:
        failure = AnalysisFailed(file_name=context.file.name, reason=message)
        return Contract(
            id=context.contract_id,
            file_name=context.file.name,
            upload_date=self._clock(),
            extracted_text=f"Error processing file: {message}",
            analysis=to_analysis_result(failure),
            storage_key=storage_key,
        )


def summarize(contracts: Sequence[Contract]) -> ProcessingSummary:
    successful = sum(1 for c in contracts if is_analysis_successful(c.analysis))
    quality_scores = [calculate_quality_score(c.analysis) for c in contracts]
    average = sum(quality_scores) / len(quality_scores) if quality_scores else 0
    return ProcessingSummary(
        total_files=len(contracts),
        successfully_processed=successful,
        failed=len(contracts) - successful,
        average_quality_score=math.floor(average + 0.5),
        high_risk_contracts=sum(1 for c in contracts if is_high_risk(c.analysis)),
    )


@dataclass(frozen=True)
class ServiceContainer:
    """Clients and use cases built once per process."""

    processor: ContractProcessor
    deleter: ContractDeleter


def build_services(settings: Settings) -> ServiceContainer:
    """Build the processor and deleter with all required adapters.

    Raises:
        ConfigurationError: if a required setting is missing or invalid.
    """
    settings.validate_required()
    storage = FileStorageFactory.create(settings)
    ocr_client = OcrClientFactory.create(settings)
    poller = OcrJobPoller(
        ocr_client,
        poll_interval_seconds=settings.ocr_poll_interval_seconds,
        max_attempts=settings.ocr_max_attempts,
    )
    extractor = TextExtractor(
        storage=storage,
        ocr_client=ocr_client,
        poller=poller,
        bucket=settings.s3_bucket_name,
        fallback_max_size=settings.fallback_max_size_bytes,
    )
    analyzer = AnalyzerFactory.create(settings)
    steps: list[PipelineStep] = [
        ExtractTextStep(extractor),
        ScoreTextQualityStep(),
        AnalyzeStep(analyzer),
        QualityCheckStep(),
    ]
    processor = ContractProcessor(
        steps,
        max_file_size=settings.max_file_size_bytes,
        supported_extensions=frozenset(ext.lower() for ext in settings.supported_extensions),
        supported_mime_types=frozenset(settings.supported_mime_types),
    )
    deleter = ContractDeleter(storage=storage, bucket=settings.s3_bucket_name)
    return ServiceContainer(processor=processor, deleter=deleter)
