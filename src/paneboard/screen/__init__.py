"""Screen management: draw cycle orchestration and output interception."""

from paneboard.screen.interceptor import OutputInterceptor, SideBuffer
from paneboard.screen.manager import DiagnosticLog, DrawOutcome, ScreenManager, format_trace

__all__ = [
    "OutputInterceptor",
    "SideBuffer",
    "DiagnosticLog",
    "DrawOutcome",
    "ScreenManager",
    "format_trace",
]
