from typing import Any, Callable

import orjson
import structlog

from spa_admin.utils.metaclasses import Singleton

from .enums import RendererNames
from .interfaces import (
    BaseLoggerFactory,
    ILogProcessor,
    ProcessorStrategy,
    register_in,
)


class RendererFactory(BaseLoggerFactory[ILogProcessor], metaclass=Singleton):
    pass


class RendererBuilder:
    def __init__(self, factory: RendererFactory) -> None:
        self.factory = factory

    def build_renderer(self, debug: bool) -> ILogProcessor:
        """Colour console output while debugging, JSON lines otherwise."""
        if not debug:
            return self.factory.create(RendererNames.JSON)
        return self.factory.create(
            RendererNames.CONSOLE, colors=True, pad_event_to=30
        )


def orjson_dumps(
    data: Any,
    default: Callable[[Any], Any] | None = None,
    option: int | None = None,
) -> str:
    return orjson.dumps(data, default=default, option=option).decode("utf-8")


@register_in(RendererFactory, RendererNames.JSON)
class JsonRenderStrategy(ProcessorStrategy):
    def __init__(self) -> None:
        self.processor = structlog.processors.JSONRenderer(
            serializer=orjson_dumps
        )


@register_in(RendererFactory, RendererNames.CONSOLE)
class ConsoleRenderStrategy(ProcessorStrategy):
    def __init__(self, colors: bool = True, pad_event_to: int = 30) -> None:
        self.processor = structlog.dev.ConsoleRenderer(
            colors=colors,
            pad_event_to=pad_event_to,
        )
