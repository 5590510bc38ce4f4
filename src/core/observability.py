"""
Structured Logging — логирование контейнеров

Модули пакета пишут только DEBUG записи через logging.getLogger(__name__)
(конструирование и преобразования векторов). Обработчики подключает
хост-программа; setup_logging делает это для логгера пакета "src".

Инварианты:
    - JSON запись всегда содержит timestamp, level, logger и message
    - vector_type, operation и length выводятся, только если переданы в extra
    - Нарушения контрактов не логируются, а поднимаются исключениями
    - Повторный setup_logging заменяет свой handler, а не дублирует его
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

# Extra поля, которые модули пакета передают в logger.debug(..., extra=...)
VECTOR_FIELDS: Tuple[str, ...] = ("vector_type", "operation", "length")

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

# (логгер, handler), подключённые последним вызовом setup_logging
_installed: Optional[Tuple[logging.Logger, logging.Handler]] = None


class JSONFormatter(logging.Formatter):
    """Одна JSON строка на запись, с extra полями векторов."""

    def __init__(self, fields: Tuple[str, ...] = VECTOR_FIELDS):
        super().__init__()
        self.fields = fields

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (name, getattr(record, name))
            for name in self.fields
            if getattr(record, name, None) is not None
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json", logger_name: str = "src") -> logging.Handler:
    """
    Подключение stream handler к логгеру пакета.

    Args:
        level: Имя уровня ("DEBUG", "INFO", ...); неизвестное имя → INFO
        fmt: "json" (JSONFormatter) или любое другое значение для текста
        logger_name: Логгер, к которому подключается handler

    Returns:
        Подключённый handler
    """
    global _installed

    if _installed is not None:
        previous_logger, previous_handler = _installed
        previous_logger.removeHandler(previous_handler)

    target = logging.getLogger(logger_name)

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT))
    target.addHandler(handler)
    resolved = logging.getLevelName(level.upper())
    target.setLevel(resolved if isinstance(resolved, int) else logging.INFO)

    _installed = (target, handler)
    return handler
