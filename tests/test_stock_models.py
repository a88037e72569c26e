"""Tests for the Stock data access methods against a real SQLite DB in tmpdir."""

from pystock.models.stock_models import Stock


async def _insert(session, **overrides):
    values = {"name": "Tesla", "price": 900, "company": "Tesla Inc"}
    values.update(overrides)
    return await Stock.insert(session, **values)


# ---------------------------------------------------------------------------
# Insert / fetch
# ---------------------------------------------------------------------------

class TestInsert:
    async def test_assigns_id(self, session):
        stock = await _insert(session)
        assert stock.id is not None

    async def test_ids_are_unique(self, session):
        first = await _insert(session, name="Tesla")
        second = await _insert(session, name="Apple")
        assert first.id != second.id

    async def test_round_trip(self, session):
        stock = await _insert(session, name="Apple", price=180, company="Apple Inc")
        fetched = await Stock.fetch(session, stock.id)
        assert (fetched.id, fetched.name, fetched.price, fetched.company) == (
            stock.id, "Apple", 180, "Apple Inc"
        )


class TestFetch:
    async def test_missing_returns_none(self, session):
        assert await Stock.fetch(session, 12345) is None

    async def test_repeated_reads_match(self, session):
        stock = await _insert(session)
        first = await Stock.fetch(session, stock.id)
        second = await Stock.fetch(session, stock.id)
        assert first.model_dump() == second.model_dump()


class TestFetchAll:
    async def test_empty_table(self, session):
        assert await Stock.fetchAll(session) == []

    async def test_returns_every_row(self, session):
        names = {"Tesla", "Apple", "Nvidia"}
        for name in names:
            await _insert(session, name=name)
        stocks = await Stock.fetchAll(session)
        assert len(stocks) == 3
        assert {s.name for s in stocks} == names


# ---------------------------------------------------------------------------
# Update / delete
# ---------------------------------------------------------------------------

class TestUpdateById:
    async def test_updates_target_row(self, session):
        stock_id = (await _insert(session)).id
        count = await Stock.updateById(session, stock_id, name="Tesla", price=950, company="Tesla Inc")
        assert count == 1
        session.expire_all()
        fetched = await Stock.fetch(session, stock_id)
        assert fetched.price == 950

    async def test_leaves_other_rows_alone(self, session):
        target_id = (await _insert(session, name="Tesla")).id
        other_id = (await _insert(session, name="Apple", price=180, company="Apple Inc")).id
        await Stock.updateById(session, target_id, name="Changed", price=1, company="Changed Inc")
        session.expire_all()
        untouched = await Stock.fetch(session, other_id)
        assert (untouched.name, untouched.price, untouched.company) == ("Apple", 180, "Apple Inc")

    async def test_missing_id_affects_nothing(self, session):
        count = await Stock.updateById(session, 999, name="x", price=1, company="y")
        assert count == 0


class TestDeleteById:
    async def test_removes_exactly_one_row(self, session):
        target_id = (await _insert(session, name="Tesla")).id
        other_id = (await _insert(session, name="Apple")).id
        count = await Stock.deleteById(session, target_id)
        assert count == 1
        session.expire_all()
        assert await Stock.fetch(session, target_id) is None
        assert await Stock.fetch(session, other_id) is not None

    async def test_missing_id_affects_nothing(self, session):
        assert await Stock.deleteById(session, 999) == 0
