"""
Student endpoints (`/alunos`).
"""

from __future__ import annotations

from fastapi import APIRouter, status

from core import errors

from . import repository, schemas

router = APIRouter()

NOT_FOUND = "Aluno não encontrado"


@router.get("/alunos")
async def list_alunos() -> list[dict]:
    with errors.failures():
        return await repository.list_alunos()


@router.get("/alunos/{id_aluno}")
async def get_aluno(id_aluno: int) -> dict:
    with errors.failures():
        row = await repository.get_aluno(id_aluno)
    if row is None:
        raise errors.NotFoundError(NOT_FOUND)
    return row


@router.post("/alunos", status_code=status.HTTP_201_CREATED)
async def create_aluno(payload: schemas.AlunoIn) -> dict:
    with errors.failures():
        return await repository.create_aluno(
            tx_nome=payload.tx_nome,
            tx_sexo=payload.tx_sexo,
            dt_nascimento=payload.dt_nascimento,
        )


@router.put("/alunos/{id_aluno}")
async def update_aluno(id_aluno: int, payload: schemas.AlunoIn) -> dict:
    with errors.failures():
        row = await repository.update_aluno(
            id_aluno,
            tx_nome=payload.tx_nome,
            tx_sexo=payload.tx_sexo,
            dt_nascimento=payload.dt_nascimento,
        )
    if row is None:
        raise errors.NotFoundError(NOT_FOUND)
    return row


@router.delete("/alunos/{id_aluno}")
async def delete_aluno(id_aluno: int) -> dict:
    with errors.failures():
        row = await repository.delete_aluno(id_aluno)
    if row is None:
        raise errors.NotFoundError(NOT_FOUND)
    return {"message": "Aluno removido com sucesso"}
