"""Schema catalog read from a JSON document.

Layout::

    {
      "server": "SQLSERVER01",
      "owner": "sa",
      "databases": [
        {"name": "HRSystem", "schemas": [
          {"name": "HR", "objects": [
            {"name": "EMP_Details", "type": "table",
             "columns": ["EmployeeID", "FirstName", "Salary"]}
          ]}
        ]}
      ]
    }

Securable ids are dot-qualified below the server: ``HRSystem``,
``HRSystem.HR``, ``HRSystem.HR.EMP_Details``, ``HRSystem.HR.EMP_Details.Salary``.
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from sqlacl.application.dto.securable_definition import SecurableDefinition
from sqlacl.domain.exceptions import ValidationError
from sqlacl.domain.value_objects import ObjectType, SecurableKind


def _check_name(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("name must not be empty")
    if "." in value:
        raise ValueError(f"name must not contain '.': {value}")
    return value


class _CatalogNode(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    owner: str | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _check_name(v)


class CatalogObject(_CatalogNode):
    """Table, view, procedure, function or type."""

    type: ObjectType = ObjectType.TABLE
    columns: list[str] = Field(default_factory=list)

    @field_validator("columns")
    @classmethod
    def validate_columns(cls, v: list[str]) -> list[str]:
        names = [_check_name(c) for c in v]
        if len(set(names)) != len(names):
            raise ValueError("duplicate column name")
        return names


class CatalogSchema(_CatalogNode):
    objects: list[CatalogObject] = Field(default_factory=list)


class CatalogDatabase(_CatalogNode):
    schemas: list[CatalogSchema] = Field(default_factory=list)


class CatalogDocument(BaseModel):
    """Whole catalog: one server and everything below it."""

    model_config = ConfigDict(extra="forbid")

    server: str
    owner: str | None = None
    databases: list[CatalogDatabase] = Field(default_factory=list)

    @field_validator("server")
    @classmethod
    def validate_server(cls, v: str) -> str:
        return _check_name(v)


class JsonSchemaCatalog:
    """SchemaCatalog backed by a JSON document."""

    def __init__(self, document: str | bytes | dict[str, Any]) -> None:
        self._document = document

    @classmethod
    def from_file(cls, path: str | Path) -> "JsonSchemaCatalog":
        return cls(Path(path).read_text(encoding="utf-8"))

    def load(self) -> list[SecurableDefinition]:
        """Validate the document and flatten it, parents before children."""
        try:
            if isinstance(self._document, dict):
                doc = CatalogDocument.model_validate(self._document)
            else:
                doc = CatalogDocument.model_validate_json(self._document)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid schema catalog: {e}") from e

        definitions = [
            SecurableDefinition(
                id=doc.server,
                kind=SecurableKind.SERVER,
                parent_id=None,
                owner=doc.owner,
            )
        ]
        for database in doc.databases:
            db_id = database.name
            definitions.append(
                SecurableDefinition(
                    id=db_id,
                    kind=SecurableKind.DATABASE,
                    parent_id=doc.server,
                    owner=database.owner,
                )
            )
            for schema in database.schemas:
                schema_id = f"{db_id}.{schema.name}"
                definitions.append(
                    SecurableDefinition(
                        id=schema_id,
                        kind=SecurableKind.SCHEMA,
                        parent_id=db_id,
                        owner=schema.owner,
                    )
                )
                for obj in schema.objects:
                    obj_id = f"{schema_id}.{obj.name}"
                    definitions.append(
                        SecurableDefinition(
                            id=obj_id,
                            kind=SecurableKind.OBJECT,
                            parent_id=schema_id,
                            object_type=obj.type,
                            owner=obj.owner,
                        )
                    )
                    definitions.extend(
                        SecurableDefinition(
                            id=f"{obj_id}.{column}",
                            kind=SecurableKind.COLUMN,
                            parent_id=obj_id,
                        )
                        for column in obj.columns
                    )
        return definitions
