from abc import ABCMeta
from threading import Lock
from typing import Any, Type


class Singleton(ABCMeta):
    __instances: dict[Type, object] = {}
    __lock: Lock = Lock()

    def __call__(cls, *args: Any, **kwargs: Any):
        if cls not in Singleton.__instances:
            with Singleton.__lock:
                if cls not in Singleton.__instances:
                    Singleton.__instances[cls] = super().__call__(
                        *args, **kwargs
                    )
        return Singleton.__instances[cls]

    def clear_instance(cls) -> None:
        with Singleton.__lock:
            Singleton.__instances.pop(cls, None)
