from .extraction_plan import ExtractionPlanPayload, FieldPayload

__all__ = ["ExtractionPlanPayload", "FieldPayload"]
