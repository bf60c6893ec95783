"""
Discipline endpoints (`/disciplinas`).
"""

from __future__ import annotations

from fastapi import APIRouter, status

from core import errors

from . import repository, schemas, service

router = APIRouter()

NOT_FOUND = "Disciplina não encontrada"


@router.get("/disciplinas")
async def list_disciplinas() -> list[dict]:
    with errors.failures():
        return await repository.list_disciplinas()


@router.get("/disciplinas/estatisticas/disciplinas")
async def disciplinas_por_curso() -> list[schemas.DisciplinasPorCurso]:
    """
    Number of disciplines per course, largest first.
    """
    with errors.failures("Erro ao buscar estatísticas de disciplinas"):
        return await service.disciplinas_por_curso()


@router.get("/disciplinas/{id_disciplina}")
@errors.rejects(errors.MESSAGE, message="Erro ao buscar disciplina")
async def get_disciplina(id_disciplina: int) -> dict:
    with errors.failures("Erro ao buscar disciplina", style=errors.MESSAGE):
        row = await repository.get_disciplina(id_disciplina)
    if row is None:
        raise errors.NotFoundError(NOT_FOUND, style=errors.MESSAGE)
    return row


@router.post("/disciplinas", status_code=status.HTTP_201_CREATED)
async def create_disciplina(payload: schemas.DisciplinaIn) -> dict:
    with errors.failures():
        return await repository.create_disciplina(
            id_curso=payload.id_curso,
            id_tipo_disciplina=payload.id_tipo_disciplina,
            tx_sigla=payload.tx_sigla,
            tx_descricao=payload.tx_descricao,
            in_periodo=payload.in_periodo,
            in_carga_horaria=payload.in_carga_horaria,
        )


@router.post("/disciplinas/curso/{id_curso}", status_code=status.HTTP_201_CREATED)
@errors.rejects(errors.MESSAGE, message="Erro ao adicionar disciplina ao curso")
async def add_disciplina_to_curso(id_curso: int, payload: schemas.DisciplinaFields) -> dict:
    """
    Add a discipline to an existing course (404 when the course is absent).
    """
    with errors.failures("Erro ao adicionar disciplina ao curso", style=errors.MESSAGE):
        return await service.add_to_curso(id_curso, payload)


@router.put("/disciplinas/{id_disciplina}")
@errors.rejects(errors.MESSAGE, message="Erro ao atualizar disciplina")
async def update_disciplina(id_disciplina: int, payload: schemas.DisciplinaIn) -> dict:
    with errors.failures("Erro ao atualizar disciplina", style=errors.MESSAGE):
        row = await repository.update_disciplina(
            id_disciplina,
            id_curso=payload.id_curso,
            id_tipo_disciplina=payload.id_tipo_disciplina,
            tx_sigla=payload.tx_sigla,
            tx_descricao=payload.tx_descricao,
            in_periodo=payload.in_periodo,
            in_carga_horaria=payload.in_carga_horaria,
        )
    if row is None:
        raise errors.NotFoundError(NOT_FOUND, style=errors.MESSAGE)
    return row


@router.delete("/disciplinas/{id_disciplina}")
@errors.rejects(errors.MESSAGE, message="Erro ao remover disciplina")
async def delete_disciplina(id_disciplina: int) -> dict:
    with errors.failures("Erro ao remover disciplina", style=errors.MESSAGE):
        row = await repository.delete_disciplina(id_disciplina)
    if row is None:
        raise errors.NotFoundError(NOT_FOUND, style=errors.MESSAGE)
    return {"message": "Disciplina removida com sucesso"}
