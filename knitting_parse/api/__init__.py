from .validate import ValidationReport, validate_pattern

__all__ = [
    "ValidationReport",
    "validate_pattern",
]
