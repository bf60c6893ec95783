"""
Pydantic schemas for discipline endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class DisciplinaFields(BaseModel):
    id_tipo_disciplina: int | None = Field(default=None, examples=[1])
    tx_sigla: str | None = Field(default=None, examples=["POO"])
    tx_descricao: str | None = Field(default=None, examples=["Programação Orientada a Objetos"])
    in_periodo: int | None = Field(default=None, examples=[3])
    in_carga_horaria: int | None = Field(default=None, examples=[60])


class DisciplinaIn(DisciplinaFields):
    id_curso: int | None = Field(default=None, examples=[1])


class DisciplinasPorCurso(BaseModel):
    curso: str | None
    quantidade_disciplinas: int
