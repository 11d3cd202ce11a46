"""交互栈模块"""
from .interactive import StackSession

__all__ = ['StackSession']
