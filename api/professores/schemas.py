"""
Pydantic schemas for professor endpoints.
"""

from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

# S = solteiro, C = casado, D = divorciado, V = viúvo
EstadoCivil = Literal["S", "C", "D", "V"]


class ProfessorIn(BaseModel):
    id_titulo: int | None = Field(default=None, examples=[1])
    tx_nome: str | None = Field(default=None, examples=["João Souza"])
    tx_sexo: Literal["M", "F"] | None = Field(default=None, examples=["M"])
    tx_estado_civil: EstadoCivil | None = Field(default=None, examples=["C"])
    dt_nascimento: date | None = Field(default=None, examples=["1975-06-30"])
    tx_telefone: str | None = Field(default=None, max_length=25, examples=["(11) 99999-0000"])
