"""
Student persistence (raw SQL).
"""

from __future__ import annotations

from datetime import date
from typing import Any

from core import db


async def list_alunos() -> list[dict[str, Any]]:
    return await db.fetch_all("SELECT * FROM aluno ORDER BY id_aluno")


async def get_aluno(id_aluno: int) -> dict[str, Any] | None:
    return await db.fetch_one("SELECT * FROM aluno WHERE id_aluno = $1", id_aluno)


async def create_aluno(
    *,
    tx_nome: str | None,
    tx_sexo: str | None,
    dt_nascimento: date | None,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        INSERT INTO aluno (tx_nome, tx_sexo, dt_nascimento)
        VALUES ($1, $2, $3)
        RETURNING *
        """,
        tx_nome,
        tx_sexo,
        dt_nascimento,
    )


async def update_aluno(
    id_aluno: int,
    *,
    tx_nome: str | None,
    tx_sexo: str | None,
    dt_nascimento: date | None,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        UPDATE aluno
        SET tx_nome = COALESCE($2, tx_nome),
            tx_sexo = COALESCE($3, tx_sexo),
            dt_nascimento = COALESCE($4, dt_nascimento)
        WHERE id_aluno = $1
        RETURNING *
        """,
        id_aluno,
        tx_nome,
        tx_sexo,
        dt_nascimento,
    )


async def delete_aluno(id_aluno: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        "DELETE FROM aluno WHERE id_aluno = $1 RETURNING id_aluno",
        id_aluno,
    )
