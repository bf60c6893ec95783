import pytest

USP = {"id_instituicao": 1, "tx_sigla": "USP", "tx_descricao": "Universidade de São Paulo"}


@pytest.mark.asyncio
async def test_list_orders_by_primary_key(client, fake_db):
    fake_db.queue([USP, {**USP, "id_instituicao": 2, "tx_sigla": "UFRJ"}])

    response = await client.get("/instituicoes")

    assert response.status_code == 200
    assert [row["id_instituicao"] for row in response.json()] == [1, 2]
    assert fake_db.last_sql.endswith("ORDER BY id_instituicao")


@pytest.mark.asyncio
async def test_create_returns_generated_id(client, fake_db):
    fake_db.queue(USP)

    response = await client.post(
        "/instituicoes",
        json={"tx_sigla": "USP", "tx_descricao": "Universidade de São Paulo"},
    )

    assert response.status_code == 201
    assert response.json()["id_instituicao"] == 1
    assert fake_db.last_sql.startswith("INSERT INTO instituicao")
    assert fake_db.last_args == ("USP", "Universidade de São Paulo")


@pytest.mark.asyncio
async def test_get_absent_id_is_404_plain_text(client, fake_db):
    response = await client.get("/instituicoes/999999")

    assert response.status_code == 404
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Instituição não encontrada"
    assert fake_db.last_args == (999999,)


@pytest.mark.asyncio
async def test_get_existing(client, fake_db):
    fake_db.queue(USP)

    response = await client.get("/instituicoes/1")

    assert response.status_code == 200
    assert response.json() == USP


@pytest.mark.asyncio
async def test_update_keeps_omitted_fields(client, fake_db):
    fake_db.queue({**USP, "tx_descricao": "USP - São Paulo"})

    response = await client.put("/instituicoes/1", json={"tx_descricao": "USP - São Paulo"})

    assert response.status_code == 200
    assert response.json()["tx_descricao"] == "USP - São Paulo"
    assert "COALESCE($2, tx_sigla)" in fake_db.last_sql
    assert fake_db.last_args == (1, None, "USP - São Paulo")


@pytest.mark.asyncio
async def test_update_absent_id_is_404_with_single_statement(client, fake_db):
    response = await client.put("/instituicoes/42", json={"tx_sigla": "X"})

    assert response.status_code == 404
    assert len(fake_db.calls) == 1
    assert fake_db.last_sql.startswith("UPDATE instituicao")


@pytest.mark.asyncio
async def test_delete_returns_204(client, fake_db):
    fake_db.queue({"id_instituicao": 1})

    response = await client.delete("/instituicoes/1")

    assert response.status_code == 204
    assert response.content == b""


@pytest.mark.asyncio
async def test_delete_absent_id_is_404(client, fake_db):
    response = await client.delete("/instituicoes/7")

    assert response.status_code == 404
    assert len(fake_db.calls) == 1


@pytest.mark.asyncio
async def test_database_failure_returns_driver_message(client, fake_db):
    fake_db.queue(RuntimeError('null value in column "tx_sigla" violates not-null constraint'))

    response = await client.post("/instituicoes", json={"tx_descricao": "Sem sigla"})

    assert response.status_code == 500
    assert response.text == 'null value in column "tx_sigla" violates not-null constraint'


@pytest.mark.asyncio
async def test_non_integer_id_fails_before_sql(client, fake_db):
    response = await client.get("/instituicoes/abc")

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text.startswith("path.id_instituicao:")
    assert fake_db.calls == []


@pytest.mark.asyncio
async def test_oversized_acronym_fails_before_sql(client, fake_db):
    response = await client.post("/instituicoes", json={"tx_sigla": "X" * 21, "tx_descricao": "Longa"})

    assert response.status_code == 500
    assert "body.tx_sigla" in response.text
    assert fake_db.calls == []
