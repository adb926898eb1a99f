from lease_analyzer.logging.logger import Log
from lease_analyzer.processor.models import Contract, DeleteContractResult
from lease_analyzer.storage.base import BaseFileStorage


class ContractDeleter:
    """Removes a contract and cleans up its stored object on a best-effort basis."""

    def __init__(self, *, storage: BaseFileStorage, bucket: str) -> None:
        self._storage = storage
        self._bucket = bucket

    def delete(self, contract: Contract) -> DeleteContractResult:
        """Delete a contract. Storage cleanup failures are logged, never raised."""
        Log.info(
            f"Starting contract deletion for {contract.id} ({contract.file_name}), "
            f"has storage key: {contract.storage_key is not None}"
        )
        result = DeleteContractResult(success=True, contract_id=contract.id)
        if contract.storage_key:
            self._cleanup(contract, contract.storage_key, result)
        Log.info(
            f"Deleted contract {contract.id}, "
            f"storage cleanup success: {result.storage_cleanup_success}"
        )
        return result

    def _cleanup(self, contract: Contract, key: str, result: DeleteContractResult) -> None:
        try:
            if not self._storage.exists(self._bucket, key):
                Log.warning(f"Stored file {key} not found, skipping cleanup")
                return
            self._storage.delete(self._bucket, key)
            Log.info(f"Cleaned up stored file {key} for {contract.file_name}")
        except Exception as exc:
            result.storage_cleanup_success = False
            result.errors.append(f"Failed to cleanup stored file: {exc}")
            Log.error(f"Storage cleanup failed for {key} in bucket {self._bucket}: {exc}")
