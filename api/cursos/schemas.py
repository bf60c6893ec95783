"""
Pydantic schemas for course endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class CursoIn(BaseModel):
    id_instituicao: int | None = Field(default=None, examples=[1])
    id_tipo_curso: int | None = Field(default=None, examples=[2])
    tx_descricao: str | None = Field(default=None, examples=["Engenharia de Software"])
