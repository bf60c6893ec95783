import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from alunos import router as alunos_router
from core import db, errors, settings
from cursa import router as cursa_router
from cursos import router as cursos_router
from disciplinas import router as disciplinas_router
from instituicoes import router as instituicoes_router
from professores import router as professores_router
from tipocurso import router as tipocurso_router


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(
    title="API Sistema Acadêmico",
    version="1.0.0",
    description="Documentação da API do sistema acadêmico",
    docs_url="/api-docs",
    lifespan=lifespan,
)

origins = settings.cors_origins()
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    # Browsers refuse credentials with a wildcard origin.
    allow_credentials="*" not in origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(errors.ApiError, errors.api_error_handler)
app.add_exception_handler(RequestValidationError, errors.request_validation_handler)

app.include_router(instituicoes_router.router, tags=["Instituicao"])
app.include_router(alunos_router.router, tags=["Alunos"])
app.include_router(professores_router.router, tags=["Professores"])
app.include_router(cursos_router.router, tags=["Cursos"])
app.include_router(disciplinas_router.router, tags=["Disciplinas"])
app.include_router(tipocurso_router.router, tags=["TipoCurso"])
app.include_router(cursa_router.router, tags=["Cursa"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/", response_class=PlainTextResponse)
def root() -> str:
    return "API Sistema Acadêmico rodando!"


if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.host(), port=settings.port())
