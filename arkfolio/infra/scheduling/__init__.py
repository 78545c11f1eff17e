from .timers import AsyncioTimerScheduler, VirtualTimerScheduler

__all__ = ["AsyncioTimerScheduler", "VirtualTimerScheduler"]
