"""
Course persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_cursos() -> list[dict[str, Any]]:
    return await db.fetch_all("SELECT * FROM curso ORDER BY id_curso")


async def get_curso(id_curso: int) -> dict[str, Any] | None:
    return await db.fetch_one("SELECT * FROM curso WHERE id_curso = $1", id_curso)


async def create_curso(
    *,
    id_instituicao: int | None,
    id_tipo_curso: int | None,
    tx_descricao: str | None,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        INSERT INTO curso (id_instituicao, id_tipo_curso, tx_descricao)
        VALUES ($1, $2, $3)
        RETURNING *
        """,
        id_instituicao,
        id_tipo_curso,
        tx_descricao,
    )


async def update_curso(
    id_curso: int,
    *,
    id_instituicao: int | None,
    id_tipo_curso: int | None,
    tx_descricao: str | None,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        UPDATE curso
        SET id_instituicao = COALESCE($2, id_instituicao),
            id_tipo_curso = COALESCE($3, id_tipo_curso),
            tx_descricao = COALESCE($4, tx_descricao)
        WHERE id_curso = $1
        RETURNING *
        """,
        id_curso,
        id_instituicao,
        id_tipo_curso,
        tx_descricao,
    )


async def delete_curso(id_curso: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        "DELETE FROM curso WHERE id_curso = $1 RETURNING *",
        id_curso,
    )
