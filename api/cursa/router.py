"""
Enrollment endpoints (`/cursa`): a student taking a discipline in a term,
with up to three grades.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from core import errors

from . import repository, schemas

router = APIRouter()

NOT_FOUND = "Matrícula não encontrada"
KEY_PATH = "/cursa/{id_aluno}/{id_disciplina}/{in_ano}/{in_semestre}"


@router.get("/cursa")
async def list_cursa() -> list[dict]:
    with errors.failures():
        return await repository.list_cursa()


@router.get("/cursa/aluno/{id_aluno}")
async def list_cursa_by_aluno(id_aluno: int) -> list[dict]:
    with errors.failures():
        return await repository.list_cursa_by_aluno(id_aluno)


@router.post("/cursa", status_code=status.HTTP_201_CREATED)
async def create_cursa(payload: schemas.CursaIn) -> dict:
    with errors.failures():
        return await repository.create_cursa(
            id_aluno=payload.id_aluno,
            id_disciplina=payload.id_disciplina,
            in_ano=payload.in_ano,
            in_semestre=payload.in_semestre,
            nm_nota1=payload.nm_nota1,
            nm_nota2=payload.nm_nota2,
            nm_nota3=payload.nm_nota3,
        )


@router.put(KEY_PATH)
async def update_notas(
    id_aluno: int,
    id_disciplina: int,
    in_ano: int,
    in_semestre: int,
    payload: schemas.NotasIn,
) -> dict:
    with errors.failures():
        row = await repository.update_notas(
            id_aluno=id_aluno,
            id_disciplina=id_disciplina,
            in_ano=in_ano,
            in_semestre=in_semestre,
            nm_nota1=payload.nm_nota1,
            nm_nota2=payload.nm_nota2,
            nm_nota3=payload.nm_nota3,
        )
    if row is None:
        raise errors.NotFoundError(NOT_FOUND)
    return row


@router.delete(KEY_PATH)
async def delete_cursa(id_aluno: int, id_disciplina: int, in_ano: int, in_semestre: int) -> dict:
    with errors.failures():
        row = await repository.delete_cursa(
            id_aluno=id_aluno,
            id_disciplina=id_disciplina,
            in_ano=in_ano,
            in_semestre=in_semestre,
        )
    if row is None:
        raise errors.NotFoundError(NOT_FOUND)
    return {"message": "Matrícula removida com sucesso"}
