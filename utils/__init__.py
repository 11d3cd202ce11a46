"""工具模块"""
from .trace import trace_to_frame, format_stack_listing, describe_step

__all__ = ['trace_to_frame', 'format_stack_listing', 'describe_step']
