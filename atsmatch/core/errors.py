from __future__ import annotations


class InputError(ValueError):
    def __init__(self, message: str, *, code: str = "invalid_input"):
        super().__init__(message)
        self.code = code


class EnhancementFailure(RuntimeError):
    def __init__(self, message: str, *, code: str = "enhancement_unavailable"):
        super().__init__(message)
        self.code = code


class ReevaluationFailure(RuntimeError):
    def __init__(self, message: str, *, code: str = "reevaluation_failed"):
        super().__init__(message)
        self.code = code
