"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – используются настройки по‑умолчанию
(на диск они попадают только после явного save()).
"""

import copy
import json
import math
from pathlib import Path
from geom3d.utils.logger import logger

DEFAULT_CONFIG = {
    "intersections": {
        # расстояние между прямыми, ниже которого луч «задевает» отрезок
        "ray_line_hit_distance": 0.1,
        # порог «почти параллельности» для определителя D (да, это e)
        "ray_line_parallel_epsilon": math.e,
    },
}


class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = "geom3d.json"):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path)
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Забыть загруженный экземпляр (следующий Config() перечитает файл)."""
        cls._instance = None

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
                return
            if not isinstance(data, dict):
                logger.error(f"[Config] Failed to read config: expected a JSON object, "
                             f"got {type(data).__name__}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
                return
            self.data = data
            logger.info("[Config] Loaded configuration from %s.", self.path)
        else:
            logger.debug("[Config] No config file – using defaults.")
            self.data = copy.deepcopy(DEFAULT_CONFIG)

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value
        self.save()

    def get(self, key, default=None):
        return self.data.get(key, default)

    def section_value(self, section: str, key: str):
        """Значение `section.key` с откатом на DEFAULT_CONFIG."""
        values = self.data.get(section)
        value = values.get(key) if isinstance(values, dict) else None
        if value is None:
            value = DEFAULT_CONFIG[section][key]
        return value
