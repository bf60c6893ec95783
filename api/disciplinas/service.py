"""
Discipline operations that span more than one statement.
"""

from __future__ import annotations

from typing import Any

from core import errors

from . import repository, schemas

COURSE_NOT_FOUND = "Curso não encontrado"


async def add_to_curso(id_curso: int, payload: schemas.DisciplinaFields) -> dict[str, Any] | None:
    """
    Create a discipline under `id_curso`, which must already exist.

    The existence check and the insert are separate statements; a course
    deleted in between surfaces as a foreign key failure on the insert.
    """
    if not await repository.curso_exists(id_curso):
        raise errors.NotFoundError(COURSE_NOT_FOUND, style=errors.MESSAGE)

    return await repository.create_disciplina(
        id_curso=id_curso,
        id_tipo_disciplina=payload.id_tipo_disciplina,
        tx_sigla=payload.tx_sigla,
        tx_descricao=payload.tx_descricao,
        in_periodo=payload.in_periodo,
        in_carga_horaria=payload.in_carga_horaria,
    )


async def disciplinas_por_curso() -> list[schemas.DisciplinasPorCurso]:
    rows = await repository.count_disciplinas_por_curso()
    return [
        schemas.DisciplinasPorCurso(
            curso=row["curso"],
            quantidade_disciplinas=int(row["quantidade_disciplinas"] or 0),
        )
        for row in rows
    ]
