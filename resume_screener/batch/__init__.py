from resume_screener.batch.coordinator import (
    BatchCoordinator,
    BatchValidationError,
    build_coordinator,
    validate_batch,
)

__all__ = ["BatchCoordinator", "BatchValidationError", "build_coordinator", "validate_batch"]
