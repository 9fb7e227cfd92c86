import asyncio
import inspect
from ambientimpact_core.logger import get_logger

class GlobalEventBus:
    def __init__(self):
        self.subscribers = {}
        self.log = get_logger("AmbientBus")

    def subscribe(self, topic: str):
        """Ermöglicht die Nutzung als @bus.subscribe('topic') Decorator."""
        def decorator(callback):
            if topic not in self.subscribers:
                self.subscribers[topic] = []
            self.subscribers[topic].append(callback)
            self.log.debug(f"👂 New Subscriber registered for: {topic} ({callback.__name__})")
            return callback
        return decorator

    def emit(self, topic: str, payload: dict = None):
        """Sendet ein Event an alle Subscriber."""
        if payload is None:
            payload = {}

        self.log.debug(f"📡 [EVENT] {topic} | Payload: {payload}")

        for callback in self.subscribers.get(topic, []):
            try:
                if inspect.iscoroutinefunction(callback):
                    self._schedule(callback(payload))
                else:
                    callback(payload)
            except Exception as e:
                self.log.error(f"❌ Error in callback for '{topic}': {e}", exc_info=True)

    @staticmethod
    def _schedule(coro):
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Kein laufender Loop (z.B. beim Booten): synchron abarbeiten
            asyncio.run(coro)
            return
        loop.create_task(coro)

bus = GlobalEventBus()
