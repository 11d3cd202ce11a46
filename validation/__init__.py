"""验证模块"""
from .round_trip import ReferenceEvaluator, reference_evaluate, check_round_trip

__all__ = ['ReferenceEvaluator', 'reference_evaluate', 'check_round_trip']
