from .redaction import redact_text

__all__ = ["redact_text"]
