"""
Service layer helpers that bind configuration to domain logic.
"""

from .calendar_service import CalendarService

__all__ = ["CalendarService"]
