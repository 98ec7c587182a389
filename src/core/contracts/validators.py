"""
JSON Schema Contract Validators

Модуль для валидации JSON payload матриц согласно формальному контракту.
Использует библиотеку jsonschema (Draft 2020-12).

Схемы:
- matrix.json: {"rows": int, "cols": int, "data": [number, ...]}

Payload — формат обмена матрицами с внешним кодом (UI, файлы, сеть).
Длина data сверяется с rows * cols после проверки схемы.
"""

import json
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from src.core.domain.errors import MalformedInput
from src.core.domain.matrix import Matrix

MATRIX_SCHEMA_VERSION: Final[str] = "1"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в каталоге schema/ рядом с модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'matrix')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема сама по себе невалидна
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class MatrixValidator(ContractValidator):
    """
    Валидатор для matrix контракта.

    Помимо схемы проверяет len(data) == rows * cols.
    """

    def __init__(self):
        super().__init__("matrix")

    def validate(self, data: Dict[str, Any]) -> None:
        super().validate(data)
        expected = data["rows"] * data["cols"]
        if len(data["data"]) != expected:
            raise ValidationError(
                f"data has {len(data['data'])} values, expected {expected} "
                f"for {data['rows']}x{data['cols']} matrix"
            )

    def is_valid(self, data: Dict[str, Any]) -> bool:
        try:
            self.validate(data)
        except ValidationError:
            return False
        return True


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_matrix_payload(data: Dict[str, Any]) -> None:
    """
    Валидация matrix payload.

    Raises:
        ValidationError: Если данные не соответствуют контракту
    """
    MatrixValidator().validate(data)


def matrix_to_payload(matrix: Matrix) -> Dict[str, Any]:
    """Matrix → JSON-совместимый dict."""
    return {
        "schema_version": MATRIX_SCHEMA_VERSION,
        "rows": matrix.rows,
        "cols": matrix.cols,
        "data": matrix.to_buffer(),
    }


def matrix_from_payload(data: Dict[str, Any]) -> Matrix:
    """
    JSON dict → Matrix.

    Raises:
        MalformedInput: Если payload не соответствует контракту
    """
    try:
        validate_matrix_payload(data)
    except ValidationError as e:
        raise MalformedInput(f"Invalid matrix payload: {e.message}") from e

    return Matrix(rows=data["rows"], cols=data["cols"], data=data["data"])
