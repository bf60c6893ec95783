"""
Pydantic schemas for enrollment ("cursa") endpoints.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field


class NotasIn(BaseModel):
    nm_nota1: Decimal | None = Field(default=None, examples=[7.5])
    nm_nota2: Decimal | None = Field(default=None, examples=[8.0])
    nm_nota3: Decimal | None = Field(default=None, examples=[6.5])


class CursaIn(NotasIn):
    id_aluno: int | None = Field(default=None, examples=[1])
    id_disciplina: int | None = Field(default=None, examples=[1])
    in_ano: int | None = Field(default=None, examples=[2024])
    in_semestre: int | None = Field(default=None, examples=[1])
