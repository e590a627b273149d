from typing import Any

import structlog
from structlog.types import EventDict

from spa_admin.utils.metaclasses import Singleton

from .enums import ProcessorNames
from .interfaces import (
    BaseLoggerFactory,
    ILoggingConfig,
    ILogProcessor,
    ProcessorStrategy,
    register_in,
)


class ProcessorFactory(BaseLoggerFactory[ILogProcessor], metaclass=Singleton):
    pass


class ProcessorBuilder:
    def __init__(
        self,
        factory: ProcessorFactory,
        additional_processors: list[ILogProcessor] | None = None,
    ) -> None:
        self.factory = factory
        self.additional_processors = additional_processors or []

    def build_shared_chain(
        self, logging_config: ILoggingConfig
    ) -> list[ILogProcessor]:
        chain = [
            self.factory.create(name)
            for name in (
                ProcessorNames.MERGE_CONTEXTVARS,
                ProcessorNames.ADD_LOGGER_NAME,
                ProcessorNames.ADD_LOG_LEVEL,
                ProcessorNames.POSITIONAL_ARGS,
                ProcessorNames.TIMESTAMP,
                ProcessorNames.STACK_INFO,
                ProcessorNames.EXC_INFO,
            )
        ]
        chain.append(
            self.factory.create(
                ProcessorNames.CONTEXT_ADDER, logging_config=logging_config
            )
        )
        chain.append(self.factory.create(ProcessorNames.MESSAGE_CLEANER))
        chain.extend(self.additional_processors)
        return chain

    def build_formatter_wrapper(self) -> ILogProcessor:
        return self.factory.create(ProcessorNames.FORMATTER_WRAPPER)


class LogMessageCleaner:
    """Strip surrounding whitespace from the event text."""

    def __call__(
        self, logger: Any, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event = event_dict.get("event")
        if isinstance(event, str):
            event_dict["event"] = event.strip()
        return event_dict


class AppContextAdder:
    """Tag every entry with the application name."""

    def __init__(self, app_name: str) -> None:
        self.app_name = app_name

    def __call__(
        self, logger: Any, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event_dict.setdefault("app", self.app_name)
        return event_dict


@register_in(ProcessorFactory, ProcessorNames.MERGE_CONTEXTVARS)
class MergeContextvarsStrategy(ProcessorStrategy):
    def __init__(self) -> None:
        self.processor = structlog.contextvars.merge_contextvars


@register_in(ProcessorFactory, ProcessorNames.ADD_LOGGER_NAME)
class AddLoggerNameStrategy(ProcessorStrategy):
    def __init__(self) -> None:
        self.processor = structlog.stdlib.add_logger_name


@register_in(ProcessorFactory, ProcessorNames.ADD_LOG_LEVEL)
class AddLogLevelStrategy(ProcessorStrategy):
    def __init__(self) -> None:
        self.processor = structlog.stdlib.add_log_level


@register_in(ProcessorFactory, ProcessorNames.POSITIONAL_ARGS)
class PositionalArgsFormatterStrategy(ProcessorStrategy):
    def __init__(self) -> None:
        self.processor = structlog.stdlib.PositionalArgumentsFormatter()


@register_in(ProcessorFactory, ProcessorNames.TIMESTAMP)
class TimestampStamperStrategy(ProcessorStrategy):
    def __init__(self, fmt: str | None = "%Y-%m-%d %H:%M:%S") -> None:
        self.processor = structlog.processors.TimeStamper(fmt=fmt)


@register_in(ProcessorFactory, ProcessorNames.STACK_INFO)
class StackInfoRendererStrategy(ProcessorStrategy):
    def __init__(self) -> None:
        self.processor = structlog.processors.StackInfoRenderer()


@register_in(ProcessorFactory, ProcessorNames.EXC_INFO)
class ExcInfoFormatterStrategy(ProcessorStrategy):
    def __init__(self) -> None:
        self.processor = structlog.processors.format_exc_info


@register_in(ProcessorFactory, ProcessorNames.CONTEXT_ADDER)
class AppContextAdderStrategy(ProcessorStrategy):
    def __init__(self, logging_config: ILoggingConfig) -> None:
        self.processor = AppContextAdder(app_name=logging_config.app_name)


@register_in(ProcessorFactory, ProcessorNames.MESSAGE_CLEANER)
class LogMessageCleanerStrategy(ProcessorStrategy):
    def __init__(self) -> None:
        self.processor = LogMessageCleaner()


@register_in(ProcessorFactory, ProcessorNames.FORMATTER_WRAPPER)
class FormatterWrapperStrategy(ProcessorStrategy):
    def __init__(self) -> None:
        self.processor = (
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter
        )
