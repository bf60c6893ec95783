"""
Professor persistence (raw SQL).
"""

from __future__ import annotations

from datetime import date
from typing import Any

from core import db


async def list_professores() -> list[dict[str, Any]]:
    return await db.fetch_all("SELECT * FROM professor ORDER BY id_professor")


async def get_professor(id_professor: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        "SELECT * FROM professor WHERE id_professor = $1",
        id_professor,
    )


async def create_professor(
    *,
    id_titulo: int | None,
    tx_nome: str | None,
    tx_sexo: str | None,
    tx_estado_civil: str | None,
    dt_nascimento: date | None,
    tx_telefone: str | None,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        INSERT INTO professor (id_titulo, tx_nome, tx_sexo, tx_estado_civil, dt_nascimento, tx_telefone)
        VALUES ($1, $2, $3, $4, $5, $6)
        RETURNING *
        """,
        id_titulo,
        tx_nome,
        tx_sexo,
        tx_estado_civil,
        dt_nascimento,
        tx_telefone,
    )


async def update_professor(
    id_professor: int,
    *,
    id_titulo: int | None,
    tx_nome: str | None,
    tx_sexo: str | None,
    tx_estado_civil: str | None,
    dt_nascimento: date | None,
    tx_telefone: str | None,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        UPDATE professor
        SET id_titulo = COALESCE($2, id_titulo),
            tx_nome = COALESCE($3, tx_nome),
            tx_sexo = COALESCE($4, tx_sexo),
            tx_estado_civil = COALESCE($5, tx_estado_civil),
            dt_nascimento = COALESCE($6, dt_nascimento),
            tx_telefone = COALESCE($7, tx_telefone)
        WHERE id_professor = $1
        RETURNING *
        """,
        id_professor,
        id_titulo,
        tx_nome,
        tx_sexo,
        tx_estado_civil,
        dt_nascimento,
        tx_telefone,
    )


async def delete_professor(id_professor: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        "DELETE FROM professor WHERE id_professor = $1 RETURNING id_professor",
        id_professor,
    )
