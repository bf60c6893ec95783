"""
Discipline persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_disciplinas() -> list[dict[str, Any]]:
    return await db.fetch_all("SELECT * FROM disciplina ORDER BY id_disciplina")


async def get_disciplina(id_disciplina: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        "SELECT * FROM disciplina WHERE id_disciplina = $1",
        id_disciplina,
    )


async def create_disciplina(
    *,
    id_curso: int | None,
    id_tipo_disciplina: int | None,
    tx_sigla: str | None,
    tx_descricao: str | None,
    in_periodo: int | None,
    in_carga_horaria: int | None,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        INSERT INTO disciplina (
          id_curso,
          id_tipo_disciplina,
          tx_sigla,
          tx_descricao,
          in_periodo,
          in_carga_horaria
        )
        VALUES ($1, $2, $3, $4, $5, $6)
        RETURNING *
        """,
        id_curso,
        id_tipo_disciplina,
        tx_sigla,
        tx_descricao,
        in_periodo,
        in_carga_horaria,
    )


async def update_disciplina(
    id_disciplina: int,
    *,
    id_curso: int | None,
    id_tipo_disciplina: int | None,
    tx_sigla: str | None,
    tx_descricao: str | None,
    in_periodo: int | None,
    in_carga_horaria: int | None,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        UPDATE disciplina
        SET id_curso = COALESCE($2, id_curso),
            id_tipo_disciplina = COALESCE($3, id_tipo_disciplina),
            tx_sigla = COALESCE($4, tx_sigla),
            tx_descricao = COALESCE($5, tx_descricao),
            in_periodo = COALESCE($6, in_periodo),
            in_carga_horaria = COALESCE($7, in_carga_horaria)
        WHERE id_disciplina = $1
        RETURNING *
        """,
        id_disciplina,
        id_curso,
        id_tipo_disciplina,
        tx_sigla,
        tx_descricao,
        in_periodo,
        in_carga_horaria,
    )


async def delete_disciplina(id_disciplina: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        "DELETE FROM disciplina WHERE id_disciplina = $1 RETURNING id_disciplina",
        id_disciplina,
    )


async def curso_exists(id_curso: int) -> bool:
    row = await db.fetch_one(
        """
        SELECT 1 AS ok
        FROM curso
        WHERE id_curso = $1
        LIMIT 1
        """,
        id_curso,
    )
    return row is not None


async def count_disciplinas_por_curso() -> list[dict[str, Any]]:
    """
    Number of disciplines per course description, largest first.

    LEFT JOIN keeps courses without disciplines (count 0). Courses sharing a
    description are counted together.
    """
    return await db.fetch_all(
        """
        SELECT
          c.tx_descricao AS curso,
          COUNT(d.id_disciplina) AS quantidade_disciplinas
        FROM curso c
        LEFT JOIN disciplina d ON c.id_curso = d.id_curso
        GROUP BY c.tx_descricao
        ORDER BY quantidade_disciplinas DESC, curso ASC
        """
    )
