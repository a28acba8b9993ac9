"""
Загрузчик фикстур из YAML файлов.

Формат файла:

    include:
      - users.yml
    src.models.v1.users.UserModel:
      base_user (template):
        is_active: true
      user_admin (extends base_user):
        username: admin
        contact: "@contact_admin"
      user{1..3}:
        username: "user<current()>"
        email: "<email('user<current()>')>"

Ключи верхнего уровня — пути импорта классов, ключи второго уровня — имена
ссылок на создаваемые объекты.
"""

import importlib
import logging
import random
import re
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

import yaml

from src.core.exceptions import (FixtureDefinitionError, ProviderNotFoundError,
                                 ReferenceNotFoundError)
from src.core.fixtures.interfaces import Persister

KEY_PATTERN = re.compile(r"^(?P<name>.+?)\s*(?:\((?P<flags>[^()]*)\))?$")
RANGE_PATTERN = re.compile(r"\{(?P<start>\d+)\.\.(?P<end>\d+)\}")
LIST_PATTERN = re.compile(r"\{(?P<items>[^{}]+)\}")
FUNCTION_PATTERN = re.compile(r"<(?P<name>\w+)\((?P<args>[^<>]*)\)>")

INCLUDE_KEY = "include"


class YamlFixtureLoader:
    """
    Строит объекты из YAML файлов фикстур.

    Поддерживает:
    - ссылки "@name", "@name.attr" и "@prefix*" (случайный объект по префиксу);
    - вызовы провайдеров "<func(args)>", встроенная функция current();
    - диапазоны имён "user{1..10}" и списки "member_{alice, bob}";
    - шаблоны "(template)" и наследование "(extends name)";
    - подключение других файлов через ключ include.

    Attributes:
        references (Dict[str, Any]): Созданные и переданные извне объекты по именам.
        templates (Dict): Поля шаблонов по (класс, имя).
        providers (List): Провайдеры функций для значений фикстур.
        persister (Persister | None): Слой сохранения.
        logger (logging.Logger): Логгер.
    """

    def __init__(
        self,
        providers: Optional[Sequence[Any]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.references: Dict[str, Any] = {}
        self.templates: Dict[Tuple[type, str], Dict[str, Any]] = {}
        self.persister: Optional[Persister] = None
        self.logger = logger or logging.getLogger(self.__class__.__name__)
        self._loading: List[Path] = []
        self.set_providers(providers)

    def set_providers(self, providers: Optional[Sequence[Any]]) -> None:
        """
        Регистрирует провайдеры функций.

        Провайдер — словарь {имя: функция} или объект, публичные методы
        которого становятся функциями. Поздние провайдеры перекрывают ранние.
        """
        self.providers = list(providers or [])
        self._functions: Dict[str, Callable[..., Any]] = {}
        for provider in self.providers:
            if isinstance(provider, Mapping):
                self._functions.update(provider)
                continue
            for attr in dir(provider):
                if attr.startswith("_"):
                    continue
                member = getattr(provider, attr)
                if callable(member):
                    self._functions[attr] = member

    def set_references(self, references: Mapping[str, Any]) -> None:
        self.references = dict(references)

    def get_references(self) -> Dict[str, Any]:
        return dict(self.references)

    def set_logger(self, logger: Optional[logging.Logger]) -> None:
        if logger is not None:
            self.logger = logger

    def set_persister(self, persister: Persister) -> None:
        self.persister = persister

    def load(self, file: Any) -> List[Any]:
        """
        Загружает файл фикстур.

        Args:
            file: Путь к YAML файлу.

        Returns:
            List[Any]: Созданные объекты в порядке описания (включая
            объекты из подключённых файлов).

        Raises:
            FixtureDefinitionError: Некорректная структура файла.
            ReferenceNotFoundError: Ссылка на неизвестный объект.
            ProviderNotFoundError: Вызов неизвестной функции.
            OSError, yaml.YAMLError: Ошибки чтения и разбора файла.
        """
        path = Path(file).resolve()
        if path in self._loading:
            raise FixtureDefinitionError("циклическое подключение файла", path)

        self._loading.append(path)
        try:
            data = self._parse(path)
            objects: List[Any] = []

            includes = data.pop(INCLUDE_KEY, None) or []
            if not isinstance(includes, list):
                raise FixtureDefinitionError("include должен быть списком", path)
            for include in includes:
                objects.extend(self.load(path.parent / include))

            for class_path, specs in data.items():
                model = self._import_class(class_path, path)
                if not isinstance(specs, dict):
                    raise FixtureDefinitionError(
                        f"описание {class_path} должно быть словарём", path
                    )
                for key, spec in specs.items():
                    objects.extend(self._build(model, str(key), spec, path))
        finally:
            self._loading.pop()

        self.logger.info("📄 Загружено объектов: %d из %s", len(objects), path.name)
        return objects

    def _parse(self, path: Path) -> Dict[str, Any]:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise FixtureDefinitionError("корень файла фикстур должен быть словарём", path)
        return data

    def _import_class(self, class_path: str, path: Path) -> type:
        module_path, _, class_name = str(class_path).rpartition(".")
        if not module_path:
            raise FixtureDefinitionError(
                f"'{class_path}' не является путём импорта класса", path
            )
        try:
            module = importlib.import_module(module_path)
            model = getattr(module, class_name)
        except (ImportError, AttributeError) as e:
            raise FixtureDefinitionError(
                f"класс {class_path} не найден: {e}", path
            ) from e
        if not isinstance(model, type):
            raise FixtureDefinitionError(f"{class_path} не является классом", path)
        return model

    def _build(self, model: type, key: str, spec: Any, path: Path) -> List[Any]:
        match = KEY_PATTERN.match(key)
        if not match:
            raise FixtureDefinitionError(f"некорректное имя фикстуры '{key}'", path)
        name = match.group("name")
        flags = [
            flag.strip() for flag in (match.group("flags") or "").split(",") if flag.strip()
        ]

        if spec is None:
            spec = {}
        if not isinstance(spec, dict):
            raise FixtureDefinitionError(f"поля фикстуры {name} должны быть словарём", path)

        fields: Dict[str, Any] = {}
        is_template = False
        for flag in flags:
            if flag == "template":
                is_template = True
            elif flag.startswith("extends "):
                parent = flag[len("extends "):].strip()
                if (model, parent) not in self.templates:
                    raise FixtureDefinitionError(
                        f"шаблон {parent} для {name} не найден", path
                    )
                fields.update(self.templates[(model, parent)])
            else:
                raise FixtureDefinitionError(f"неизвестный флаг '{flag}' у {name}", path)
        fields.update(spec)

        if is_template:
            self.templates[(model, name)] = fields
            return []

        objects = []
        for ref_name, current in self._expand_name(name):
            values = {
                field: self._resolve(value, current, path) for field, value in fields.items()
            }
            try:
                obj = model(**values)
            except TypeError as e:
                raise FixtureDefinitionError(
                    f"не удалось создать {ref_name} ({model.__name__}): {e}", path
                ) from e
            self.references[ref_name] = obj
            objects.append(obj)
            self.logger.debug("Создан объект %s: %r", ref_name, obj)
        return objects

    def _expand_name(self, name: str) -> List[Tuple[str, Any]]:
        """Разворачивает диапазон или список в имени в набор (имя, current)."""
        match = RANGE_PATTERN.search(name)
        if match:
            start, end = int(match.group("start")), int(match.group("end"))
            return [
                (name[:match.start()] + str(i) + name[match.end():], i)
                for i in range(start, end + 1)
            ]
        match = LIST_PATTERN.search(name)
        if match:
            items = [item.strip() for item in match.group("items").split(",")]
            return [
                (name[:match.start()] + item + name[match.end():], item)
                for item in items
                if item
            ]
        return [(name, None)]

    def _resolve(self, value: Any, current: Any, path: Path) -> Any:
        if isinstance(value, list):
            return [self._resolve(item, current, path) for item in value]
        if isinstance(value, dict):
            return {key: self._resolve(item, current, path) for key, item in value.items()}
        if not isinstance(value, str):
            return value

        if value.startswith("\\@"):
            return self._call_functions(value[1:], current, path)

        value = self._call_functions(value, current, path)
        if isinstance(value, str) and value.startswith("@"):
            return self._reference(value[1:], path)
        return value

    def _call_functions(self, value: str, current: Any, path: Path) -> Any:
        """
        Подставляет результаты вызовов функций.

        Вызовы вычисляются изнутри наружу. Если вызов занимает всю строку,
        возвращается результат как есть, без приведения к строке.
        """
        while True:
            match = FUNCTION_PATTERN.search(value)
            if not match:
                return value
            result = self._call(match.group("name"), match.group("args"), current, path)
            if match.group(0) == value:
                return result
            value = value[:match.start()] + str(result) + value[match.end():]

    def _call(self, name: str, raw_args: str, current: Any, path: Path) -> Any:
        if name == "current":
            if current is None:
                raise FixtureDefinitionError("current() используется вне диапазона", path)
            return current

        function = self._functions.get(name)
        if function is None:
            raise ProviderNotFoundError(name)

        try:
            args = yaml.safe_load(f"[{raw_args}]")
        except yaml.YAMLError as e:
            raise FixtureDefinitionError(
                f"некорректные аргументы {name}({raw_args}): {e}", path
            ) from e
        return function(*args)

    def _reference(self, expression: str, path: Path) -> Any:
        if expression.endswith("*"):
            prefix = expression[:-1]
            candidates = [
                obj for ref_name, obj in self.references.items() if ref_name.startswith(prefix)
            ]
            if not candidates:
                raise ReferenceNotFoundError(expression)
            return random.choice(candidates)

        name, *attrs = expression.split(".")
        if name not in self.references:
            raise ReferenceNotFoundError(name)
        obj = self.references[name]
        for attr in attrs:
            try:
                obj = getattr(obj, attr)
            except AttributeError as e:
                raise FixtureDefinitionError(
                    f"у @{name} нет атрибута '{attr}'", path
                ) from e
        return obj
